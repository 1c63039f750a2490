import json
from typing import Any, Dict, List, Type

from tienda.config.paths import CATALOG_PATH
from tienda.models.product import Apparel, Electronic, Food, Product
from tienda.utils.exceptions import DataLoadError, UnknownProductTypeError
from tienda.utils.logger import logger

PRODUCT_TYPES: Dict[str, Type[Product]] = {
    "electronic": Electronic,
    "apparel": Apparel,
    "food": Food,
}

def _load_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {path}")
        raise DataLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}")
        raise DataLoadError(f"Invalid JSON in {path}") from e

def product_from_record(record: Dict[str, Any]) -> Product:
    if not isinstance(record, dict):
        raise DataLoadError(f"Catalog record is not an object: {record!r}")
    fields = dict(record)
    tag = fields.pop("type", None)
    cls = PRODUCT_TYPES.get(tag)
    if cls is None:
        logger.error(f"Unknown product type {tag!r} in record {record!r}")
        raise UnknownProductTypeError(f"Unknown product type: {tag!r}")
    try:
        return cls(**fields)
    except TypeError as e:
        logger.error(f"Bad fields for {tag} record: {record!r}")
        raise DataLoadError(f"Bad fields for {tag} record: {e}") from e

def load_products(path: str = CATALOG_PATH) -> List[Product]:
    raw = _load_json(path)
    if not isinstance(raw, list):
        raise DataLoadError(f"Expected a JSON array of products in {path}")
    products = [product_from_record(item) for item in raw]
    logger.info(f"Loaded {len(products)} products from {path}")
    return products

def load_default_catalog() -> List[Product]:
    return [
        Electronic(101, "Smartphone X", 800, "TechBrand", "X-Pro"),
        Apparel(201, "Camiseta Algodón", 25, "M", "Algodón"),
        Food(301, "Manzanas Orgánicas", 3.50, "2025-07-25", True),
        Electronic(102, "Auriculares Bluetooth", 99.99, "AudioPro", "HP-200"),
        Apparel(202, "Jeans Slim Fit", 59.99, "L", "Mezclilla"),
        Food(302, "Pan Integral", 4.20, "2025-07-20", False),
    ]
