import json
import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from tienda.data_access.loader import load_default_catalog


@pytest.fixture
def catalog():
    return load_default_catalog()


@pytest.fixture
def write_catalog(tmp_path):
    def _write(records, name="catalog.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return str(path)
    return _write
