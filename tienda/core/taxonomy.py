from typing import List
import networkx as nx
from tienda.models.product import Product
from tienda.utils.logger import logger

BASE_NODE = "base:Producto"

def product_to_node_id(product_id) -> str:
    return f"product:{product_id}"

def category_to_node_id(category: str) -> str:
    return f"category:{category}"

def build_taxonomy(products: List[Product]) -> nx.DiGraph:
    G = nx.DiGraph()
    G.add_node(BASE_NODE, node_type="base", name="Producto")

    for position, p in enumerate(products):
        cat_id = category_to_node_id(p.category)
        if cat_id not in G:
            G.add_node(cat_id, node_type="category", name=p.category, variant=type(p).__name__)
            G.add_edge(BASE_NODE, cat_id, edge_type="SPECIALIZES")

        tax = p.calculate_tax()
        pid = product_to_node_id(p.id)
        G.add_node(
            pid,
            node_type="product",
            name=p.name,
            product_id=p.id,
            category=p.category,
            variant=type(p).__name__,
            price=p.price,
            tax=tax,
            final_price=p.price + tax,
            position=position,
        )
        G.add_edge(cat_id, pid, edge_type="IS_A")

    logger.info(f"Taxonomy built: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G

def list_categories(G: nx.DiGraph) -> List[str]:
    # Successor order follows insertion, i.e. first appearance in the catalog.
    return [G.nodes[n]["name"] for n in G.successors(BASE_NODE)]

def products_in_category(G: nx.DiGraph, category: str) -> List[str]:
    cat_id = category_to_node_id(category)
    if cat_id not in G:
        return []
    members = sorted(G.successors(cat_id), key=lambda n: G.nodes[n]["position"])
    return [G.nodes[n]["name"] for n in members]
