from typing import Optional
import matplotlib.pyplot as plt
import networkx as nx

from tienda.core.taxonomy import BASE_NODE

NODE_COLORS = {
    "base": "#ffe680",
    "category": "#cfe2ff",
    "product": "#b3ffb3",
}

def visualize_taxonomy(G: nx.DiGraph) -> Optional[plt.Figure]:
    categories = list(G.successors(BASE_NODE)) if BASE_NODE in G else []
    if not categories:
        return None

    products = [n for cat in categories for n in G.successors(cat)]
    pos = nx.shell_layout(G, nlist=[[BASE_NODE], categories, products])

    colors = [NODE_COLORS.get(G.nodes[n].get("node_type"), "#f0f0f0") for n in G.nodes()]

    fig = plt.figure(figsize=(10, 6))
    nx.draw_networkx_nodes(G, pos, node_size=650, node_color=colors, edgecolors="#000000")
    nx.draw_networkx_edges(G, pos, alpha=0.7, width=1.5, edge_color="#bbbbbb", arrows=True)

    labels = {}
    for n in G.nodes():
        data = G.nodes[n]
        if data.get("node_type") == "product":
            labels[n] = f"{data['name']}\n${data['final_price']:.2f}"
        else:
            labels[n] = data.get("name", n)
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8, font_color="#000000")

    ax = plt.gca()
    ax.set_facecolor("#050b16")
    plt.title("Catalog taxonomy: categories and final prices", fontsize=10, color="#ffffff")
    plt.axis("off")
    return fig
