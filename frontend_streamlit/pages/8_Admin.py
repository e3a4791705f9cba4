"""
Admin moderation page.

Review pending listings and approve or reject them.
"""

import streamlit as st

from utils.auth import require_admin
from utils.state import get_api, get_session, init_session_state, run
from vitrine.api_client import APIError
from vitrine.services.admin import ModerationService
from vitrine.utils.formatters import format_currency, format_phone

st.set_page_config(page_title="Moderação - Vitrine", page_icon="⚙️", layout="wide")

init_session_state()
session = get_session()

st.title("⚙️ Moderação")

if not require_admin(session):
    st.stop()

moderation = ModerationService(get_api(), session)

if st.button("🔄 Atualizar"):
    st.rerun()

try:
    with st.spinner("Carregando pendentes..."):
        pending = run(moderation.pending())
except APIError as e:
    st.error(f"Erro ao carregar pendentes: {e.message}")
    st.stop()

st.caption(f"{len(pending)} anúncio(s) aguardando análise")

if not pending:
    st.info("Nenhum anúncio pendente.")
    st.stop()

for listing in pending:
    with st.container(border=True):
        col_photo, col_info, col_actions = st.columns([1, 3, 2])

        with col_photo:
            if listing.thumbnail or listing.main_photo:
                st.image(listing.thumbnail or listing.main_photo, use_container_width=True)

        with col_info:
            st.markdown(f"### {listing.name}")
            st.caption(" - ".join(part for part in (listing.city, listing.category) if part))
            st.caption(f"WhatsApp: {format_phone(listing.whatsapp) or '-'}")
            st.caption(f"1 hora: {format_currency(listing.hourly_rate)}")
            if listing.description:
                st.markdown(listing.description[:300])

        with col_actions:
            if st.button("✅ Aprovar", key=f"approve_{listing.id}", use_container_width=True):
                try:
                    result = run(moderation.approve(listing.id))
                except APIError as e:
                    st.error(e.message)
                else:
                    st.success(result.message or "Anúncio aprovado")
                    st.rerun()

            reason = st.text_input("Motivo da reprovação", key=f"reason_{listing.id}")
            if st.button("❌ Reprovar", key=f"reject_{listing.id}", use_container_width=True):
                if not reason:
                    st.error("Informe o motivo")
                else:
                    try:
                        result = run(moderation.reject(listing.id, reason))
                    except APIError as e:
                        st.error(e.message)
                    else:
                        st.success(result.message or "Anúncio reprovado")
                        st.rerun()
