from dataclasses import dataclass, field
from datetime import date
from typing import Union

from tienda.utils.formatting import to_fixed

ProductId = Union[int, str]

BASE_TAX_RATE = 0.10


@dataclass(frozen=True)
class Product:
    """Shared identity and pricing of every catalog item.

    Concrete items are built through one of the variants below, which fix
    ``category`` and supply their own tax policy and extra description lines.
    """
    id: ProductId
    name: str
    price: float
    category: str

    def calculate_tax(self) -> float:
        return self.price * BASE_TAX_RATE

    def final_price(self) -> float:
        return self.price + self.calculate_tax()

    def render_description(self) -> str:
        tax = self.calculate_tax()
        final = self.price + tax
        # The tax label stays at the base 10% whatever rate the variant applied.
        lines = [
            f"<h2>{self.name}</h2>",
            f"<p>ID: {self.id}</p>",
            f"<p>Precio: ${to_fixed(self.price)}</p>",
            f"<p class=\"categoria\">Categoría: {self.category}</p>",
            f"<p class=\"impuesto\">Impuesto (10%): ${to_fixed(tax)}</p>",
            f"<p>Precio Final: ${to_fixed(final)}</p>",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class Electronic(Product):
    brand: str
    model: str
    category: str = field(init=False, default="Electrónicos")

    def calculate_tax(self) -> float:
        return self.price * 0.15

    def render_description(self) -> str:
        return "\n".join([
            super().render_description(),
            f"<p>Marca: {self.brand}</p>",
            f"<p>Modelo: {self.model}</p>",
        ])


@dataclass(frozen=True)
class Apparel(Product):
    size: str
    material: str
    category: str = field(init=False, default="Ropa")

    def calculate_tax(self) -> float:
        return self.price * 0.08

    def render_description(self) -> str:
        return "\n".join([
            super().render_description(),
            f"<p>Talla: {self.size}</p>",
            f"<p>Material: {self.material}</p>",
        ])


@dataclass(frozen=True)
class Food(Product):
    expiration_date: Union[date, str]
    is_organic: bool
    category: str = field(init=False, default="Alimentos")

    def calculate_tax(self) -> float:
        if self.is_organic:
            return 0.0
        return self.price * 0.05

    def render_description(self) -> str:
        return "\n".join([
            super().render_description(),
            f"<p>Fecha de Caducidad: {self.expiration_date}</p>",
            f"<p>Orgánico: {'Sí' if self.is_organic else 'No'}</p>",
        ])
