from typing import Dict, List, Optional
import networkx as nx

from tienda.models.product import Product
from tienda.data_access.loader import load_products
from tienda.core import taxonomy
from tienda.core.visualize import visualize_taxonomy
from tienda.utils.logger import logger

CARD_TEMPLATE = '<div class="producto-card">{body}</div>'

class CatalogService:
    """Owns the ordered catalog and hands rendered descriptions to the Streamlit page."""

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self.products: List[Product] = list(products) if products is not None else load_products()
        self.taxonomy: nx.DiGraph = taxonomy.build_taxonomy(self.products)

    def render_all(self) -> List[str]:
        descriptions = [p.render_description() for p in self.products]
        logger.info(f"Rendered {len(descriptions)} product descriptions")
        return descriptions

    def render_cards(self, category: Optional[str] = None) -> List[str]:
        products = self.products if category is None else self.products_in_category(category)
        return [CARD_TEMPLATE.format(body=p.render_description()) for p in products]

    def list_categories(self) -> List[str]:
        return taxonomy.list_categories(self.taxonomy)

    def products_in_category(self, category: str) -> List[Product]:
        return [p for p in self.products if p.category == category]

    def totals(self) -> Dict[str, float]:
        price = sum(p.price for p in self.products)
        tax = sum(p.calculate_tax() for p in self.products)
        return {"price": price, "tax": tax, "final_price": price + tax}

    def build_visualization(self):
        return visualize_taxonomy(self.taxonomy)
