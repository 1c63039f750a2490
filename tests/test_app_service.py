import pytest

from tienda.models.product import Electronic
from tienda.pipelines.app_service import CatalogService


def test_render_all_follows_catalog_order(catalog):
    service = CatalogService(catalog)
    rendered = service.render_all()
    assert rendered == [p.render_description() for p in catalog]
    titles = [html.split("\n")[0] for html in rendered]
    assert titles == [
        "<h2>Smartphone X</h2>",
        "<h2>Camiseta Algodón</h2>",
        "<h2>Manzanas Orgánicas</h2>",
        "<h2>Auriculares Bluetooth</h2>",
        "<h2>Jeans Slim Fit</h2>",
        "<h2>Pan Integral</h2>",
    ]


def test_default_service_loads_bundled_catalog(catalog):
    service = CatalogService()
    assert service.products == catalog


def test_service_copies_the_input_list(catalog):
    service = CatalogService(catalog)
    catalog.append(Electronic(999, "Extra", 1, "b", "m"))
    assert len(service.products) == 6


def test_categories_and_filter(catalog):
    service = CatalogService(catalog)
    assert service.list_categories() == ["Electrónicos", "Ropa", "Alimentos"]
    assert [p.id for p in service.products_in_category("Alimentos")] == [301, 302]
    assert service.products_in_category("Juguetes") == []


def test_totals(catalog):
    totals = CatalogService(catalog).totals()
    assert totals["price"] == pytest.approx(992.68)
    assert totals["tax"] == pytest.approx(142.0077)
    assert totals["final_price"] == pytest.approx(1134.6877)


def test_empty_catalog():
    service = CatalogService([])
    assert service.render_all() == []
    assert service.list_categories() == []
    assert service.build_visualization() is None


def test_cards_wrap_descriptions_unchanged(catalog):
    service = CatalogService(catalog)
    cards = service.render_cards()
    assert cards == [f'<div class="producto-card">{html}</div>' for html in service.render_all()]
    assert "\\$" not in "".join(cards)
    assert "Precio: $800.00" in cards[0]


def test_cards_for_one_category(catalog):
    cards = CatalogService(catalog).render_cards("Ropa")
    assert len(cards) == 2
    assert "<h2>Camiseta Algodón</h2>" in cards[0]
    assert "<h2>Jeans Slim Fit</h2>" in cards[1]
    assert CatalogService(catalog).render_cards("Juguetes") == []
