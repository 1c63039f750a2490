import streamlit as st
from tienda.pipelines.app_service import CatalogService
from tienda.utils.formatting import to_fixed

service = CatalogService()

st.set_page_config(layout="wide", page_title="Tienda Virtual")

# ---------- Global CSS ----------
st.markdown("""
<style>
body, .main, .stApp {
    background-color: #050b16;
    color: #e0e6f0;
}
.block-container {
    padding-top: 2.8rem;
    padding-bottom: 1.5rem;
}

/* Hero area */
.hero-title {
    font-size: 30px;
    font-weight: 800;
    background: linear-gradient(90deg, #5ab0ff, #9f7bff);
    -webkit-background-clip: text;
    color: transparent;
}
.hero-subtitle {
    font-size: 14px;
    color: #9ca7c6;
}

/* Product cards */
.producto-card {
    border: 1px solid #1f2a3a;
    border-radius: 14px;
    padding: 14px 16px;
    margin-bottom: 12px;
    background: radial-gradient(circle at top left, #1a2740 0%, #050b16 55%);
    box-shadow: 0 4px 10px rgba(0,0,0,0.7);
}
.producto-card h2 {
    font-size: 17px;
    color: #ffffff;
}
.producto-card p {
    font-size: 13px;
    margin: 2px 0;
    color: #d0d6e0;
}
.producto-card .categoria {
    color: #78aaff;
}
.producto-card .impuesto {
    color: #ffc861;
}
</style>
""", unsafe_allow_html=True)

# ---------- Hero header ----------
st.markdown('<div class="hero-title">Tienda Virtual</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="hero-subtitle">Catálogo de productos con impuestos por categoría.</div>',
    unsafe_allow_html=True
)
st.write("")

totals = service.totals()
c1, c2, c3 = st.columns(3)
c1.metric("Precio base", f"${to_fixed(totals['price'])}")
c2.metric("Impuestos", f"${to_fixed(totals['tax'])}")
c3.metric("Precio final", f"${to_fixed(totals['final_price'])}")

tab_catalog, tab_graph = st.tabs(["Productos", "Taxonomía"])

with tab_catalog:
    cat = st.selectbox("Categoría", ["Todas"] + service.list_categories(), key="category_main")
    cards = service.render_cards(None if cat == "Todas" else cat)

    # One card per product, in catalog order.
    for card in cards:
        st.markdown(card, unsafe_allow_html=True)
    if not cards:
        st.write("No hay productos en esta categoría.")

with tab_graph:
    st.subheader("Producto → categoría → producto")
    fig = service.build_visualization()
    if fig:
        st.pyplot(fig)
    else:
        st.write("El catálogo está vacío.")
