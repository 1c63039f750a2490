import os

# tienda/config/paths.py

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))      # .../tienda/config
PACKAGE_DIR = os.path.dirname(CONFIG_DIR)                    # .../tienda
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)                  # .../tienda-virtual

DATA_DIR = os.path.join(PROJECT_ROOT, "data")

CATALOG_PATH = os.environ.get("TIENDA_CATALOG_PATH", os.path.join(DATA_DIR, "catalog.json"))
