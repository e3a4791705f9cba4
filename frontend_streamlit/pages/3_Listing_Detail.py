"""
Listing detail page.

Shows the full listing with its gallery and the contact actions.
"""

import streamlit as st

from utils.auth import open_url
from utils.state import get_api, init_session_state, run
from vitrine.api_client import APIError
from vitrine.services.listings import ListingService
from vitrine.services.tracking import ContactTracker
from vitrine.utils.formatters import format_bool, format_currency, format_phone

st.set_page_config(page_title="Anúncio - Vitrine", page_icon="💎", layout="wide")

init_session_state()
api = get_api()
tracker = ContactTracker(api)

slug = st.query_params.get("slug") or st.session_state.get("listing_slug")

if not slug:
    st.info("Escolha um anúncio na listagem.")
    st.page_link("pages/2_Listings.py", label="🔍 Ver anúncios")
    st.stop()

try:
    with st.spinner("Carregando anúncio..."):
        listing = run(ListingService(api).get(slug))
except APIError as e:
    st.error(f"Erro ao carregar anúncio: {e.message}")
    st.page_link("pages/2_Listings.py", label="⬅️ Voltar para anúncios")
    st.stop()

st.title(listing.name + (f", {listing.age} anos" if listing.age else ""))
if listing.headline:
    st.subheader(listing.headline)

col_gallery, col_info = st.columns([3, 2])

with col_gallery:
    if listing.gallery:
        selected = st.session_state.get("gallery_index", 0)
        selected = selected if selected < len(listing.gallery) else 0
        st.image(listing.gallery[selected].large or listing.gallery[selected].full,
                 use_container_width=True)

        thumbs = st.columns(min(len(listing.gallery), 6))
        for index, photo in enumerate(listing.gallery[:6]):
            with thumbs[index]:
                st.image(photo.thumbnail, use_container_width=True)
                if st.button("Ver", key=f"photo_{photo.id}"):
                    st.session_state.gallery_index = index
                    st.rerun()
    elif listing.main_photo:
        st.image(listing.main_photo, use_container_width=True)

with col_info:
    st.caption(" - ".join(part for part in (listing.neighborhood, listing.city, listing.state) if part))

    badges = []
    if listing.verified:
        badges.append(":green[✔ Verificada]")
    if listing.online:
        badges.append(":blue[● Online agora]")
    if badges:
        st.markdown(" ".join(badges))

    with st.container(border=True):
        st.markdown("**Valores**")
        st.markdown(f"1 hora: **{format_currency(listing.hourly_rate)}**")
        if listing.half_hour_rate:
            st.markdown(f"30 minutos: **{format_currency(listing.half_hour_rate)}**")
        if listing.overnight_rate:
            st.markdown(f"Pernoite: **{format_currency(listing.overnight_rate)}**")
        st.caption(
            f"Cartão: {format_bool(listing.accepts_card)} | "
            f"Pix: {format_bool(listing.accepts_pix)} | "
            f"Local próprio: {format_bool(listing.serves_on_site)}"
        )

    if listing.whatsapp:
        if st.button("💬 Chamar no WhatsApp", type="primary", use_container_width=True):
            run(tracker.open_whatsapp(listing, open_url))

    if listing.phone or listing.whatsapp:
        number = format_phone(listing.phone or listing.whatsapp)
        if st.button(f"📞 Ligar {number}", use_container_width=True):
            run(tracker.call(listing, lambda url: open_url(url, new_tab=False)))

    if st.button("❤️ Favoritar", use_container_width=True):
        run(tracker.favorite(listing.id))
        st.toast("Adicionado aos favoritos")

st.divider()

if listing.description:
    st.markdown("### Sobre")
    st.markdown(listing.description)

attributes = {
    "Altura": f"{listing.height} cm" if listing.height else "",
    "Peso": f"{listing.weight} kg" if listing.weight else "",
    "Medidas": listing.measurements,
    "Olhos": listing.eye_color,
    "Cabelo": listing.hair_color,
    "Etnia": listing.ethnicity,
}
attributes = {label: value for label, value in attributes.items() if value}
if attributes:
    st.markdown("### Características")
    cols = st.columns(len(attributes))
    for col, (label, value) in zip(cols, attributes.items()):
        col.metric(label, value)

if listing.services:
    st.markdown("### Serviços")
    st.markdown(" · ".join(service.name for service in listing.services))

st.caption(f"{listing.views} visualizações")
