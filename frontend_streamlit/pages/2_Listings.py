"""
Listings page.

Public browsing with filters, sorting and pagination.
"""

import asyncio

import streamlit as st

from utils.state import get_api, init_session_state, run
from vitrine.schemas.enums import SortMode
from vitrine.services.catalog import CatalogService
from vitrine.services.listings import ListingQuery
from vitrine.utils.formatters import format_currency, format_status

st.set_page_config(page_title="Anúncios - Vitrine", page_icon="🔍", layout="wide")

init_session_state()
api = get_api()

SORT_LABELS = {
    SortMode.RECENT: "Mais recentes",
    SortMode.POPULAR: "Mais populares",
    SortMode.PRICE_ASC: "Menor preço",
    SortMode.PRICE_DESC: "Maior preço",
}

if "listing_query" not in st.session_state:
    st.session_state.listing_query = ListingQuery(
        api,
        city=st.query_params.get("cidade", ""),
        category=st.query_params.get("categoria", ""),
    )

query: ListingQuery = st.session_state.listing_query


async def load_page(with_taxonomies: bool) -> dict | None:
    """Fetch the page, together with the filter taxonomies on first load."""
    if not with_taxonomies:
        await query.fetch_page()
        return None

    taxonomies, _ = await asyncio.gather(
        CatalogService(api).load_filters(),
        query.fetch_page(),
    )
    return taxonomies


with st.spinner("Carregando anúncios..."):
    taxonomies = run(load_page("taxonomies" not in st.session_state))
    if taxonomies is not None:
        st.session_state.taxonomies = taxonomies

cities = st.session_state.taxonomies["cities"]
categories = st.session_state.taxonomies["categories"]

city_options = {"": "Todas as cidades"} | {c.slug: c.name for c in cities}
category_options = {"": "Todas as categorias"} | {c.slug: c.name for c in categories}


def on_filter_change(name: str, widget_key: str) -> None:
    query.set_filter(name, st.session_state[widget_key])


city_name = city_options.get(query.filters.city, query.filters.city) if query.filters.city else "Todas as Cidades"
st.title(f"🔍 Anúncios em {city_name}")
st.caption(f"{query.total} resultados encontrados")

# Filters
col_city, col_category, col_sort, col_clear = st.columns([2, 2, 2, 1])

with col_city:
    st.selectbox(
        "Cidade",
        options=list(city_options),
        format_func=lambda slug: city_options.get(slug, slug),
        index=list(city_options).index(query.filters.city) if query.filters.city in city_options else 0,
        key="filter_city",
        on_change=on_filter_change,
        args=("city", "filter_city"),
    )

with col_category:
    st.selectbox(
        "Categoria",
        options=list(category_options),
        format_func=lambda slug: category_options.get(slug, slug),
        index=list(category_options).index(query.filters.category) if query.filters.category in category_options else 0,
        key="filter_category",
        on_change=on_filter_change,
        args=("category", "filter_category"),
    )

with col_sort:
    st.selectbox(
        "Ordenar",
        options=list(SORT_LABELS),
        format_func=SORT_LABELS.get,
        index=list(SORT_LABELS).index(query.filters.sort),
        key="filter_sort",
        on_change=on_filter_change,
        args=("sort", "filter_sort"),
    )

with col_clear:
    st.write("")
    if st.button("Limpar", use_container_width=True):
        query.clear_filters()
        for key in ("filter_city", "filter_category", "filter_sort", "filter_price_min",
                    "filter_price_max", "filter_verified", "filter_online"):
            st.session_state.pop(key, None)
        st.rerun()

with st.expander("Filtros avançados"):
    col_min, col_max, col_verified, col_online = st.columns(4)
    with col_min:
        st.text_input("Preço mínimo", value=query.filters.price_min, key="filter_price_min",
                      on_change=on_filter_change, args=("price_min", "filter_price_min"))
    with col_max:
        st.text_input("Preço máximo", value=query.filters.price_max, key="filter_price_max",
                      on_change=on_filter_change, args=("price_max", "filter_price_max"))
    with col_verified:
        st.checkbox("Apenas verificadas", value=query.filters.verified, key="filter_verified",
                    on_change=on_filter_change, args=("verified", "filter_verified"))
    with col_online:
        st.checkbox("Apenas online", value=query.filters.online, key="filter_online",
                    on_change=on_filter_change, args=("online", "filter_online"))

st.divider()

if query.error:
    st.error(query.error)

if query.is_empty:
    st.info("Nenhum anúncio encontrado com esses filtros.")
    st.stop()

cols = st.columns(4)
for index, listing in enumerate(query.items):
    with cols[index % 4]:
        with st.container(border=True):
            if listing.thumbnail or listing.main_photo:
                st.image(listing.thumbnail or listing.main_photo, use_container_width=True)

            badges = []
            if listing.verified:
                badges.append(":green[✔ Verificada]")
            if listing.online:
                badges.append(":blue[● Online]")
            plan_label, plan_color = format_status(listing.plan, "plan")
            if listing.plan.value != "free":
                badges.append(f":{plan_color}[{plan_label}]")

            title = listing.name + (f", {listing.age}" if listing.age else "")
            st.markdown(f"**{title}**")
            if badges:
                st.markdown(" ".join(badges))
            st.caption(" - ".join(part for part in (listing.neighborhood, listing.city) if part))
            st.markdown(f"**{format_currency(listing.hourly_rate)}**/hora")

            if st.button("Ver perfil", key=f"listing_{listing.id}", use_container_width=True):
                st.session_state.listing_slug = listing.slug
                st.switch_page("pages/3_Listing_Detail.py")

# Pagination
col_prev, col_info, col_next = st.columns([1, 2, 1])

with col_prev:
    if st.button("⬅️ Anterior", disabled=not query.has_previous):
        query.set_page(query.page - 1)
        st.rerun()

with col_info:
    st.caption(f"Página {query.page} de {query.total_pages} ({query.total} anúncios)")

with col_next:
    if st.button("Próxima ➡️", disabled=not query.has_next):
        query.set_page(query.page + 1)
        st.rerun()
