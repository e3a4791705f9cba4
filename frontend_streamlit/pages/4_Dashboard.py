"""
Provider dashboard.

Shows moderation status, plan and engagement statistics.
"""

import streamlit as st

from utils.auth import require_auth
from utils.state import get_api, get_session, init_session_state, run
from vitrine.api_client import APIError
from vitrine.services.dashboard import DashboardService
from vitrine.utils.formatters import format_date, format_status

st.set_page_config(page_title="Dashboard - Vitrine", page_icon="📊", layout="wide")

init_session_state()
session = get_session()

st.title("📊 Dashboard")

if not require_auth(session):
    st.stop()

st.caption(f"Olá, {session.user.name}")

try:
    with st.spinner("Carregando estatísticas..."):
        stats = run(DashboardService(get_api(), session).stats())
except APIError as e:
    st.error(f"Erro ao carregar estatísticas: {e.message}")
    st.stop()

if not stats.has_listing:
    st.info("Você ainda não tem um anúncio. Preencha seu perfil para começar.")
    st.page_link("pages/5_My_Profile.py", label="📝 Criar meu perfil")
    st.stop()

col_status, col_plan = st.columns(2)

with col_status:
    label, color = format_status(stats.listing_status, "moderation")
    st.markdown(f"**Status do anúncio:** :{color}[{label}]")

with col_plan:
    label, color = format_status(stats.plan, "plan")
    st.markdown(f"**Plano:** :{color}[{label}]")
    if stats.plan.value == "free":
        st.caption("Faça upgrade para aparecer primeiro nas buscas.")
    elif (stats.days_left or 0) > 0:
        st.caption(f"{stats.days_left} dias restantes (até {format_date(stats.plan_expires)})")
    else:
        st.caption("Plano expirado")
    st.page_link("pages/7_Plans.py", label="⭐ Ver planos")

if stats.stats:
    st.divider()
    col_views, col_whatsapp, col_phone, col_fav = st.columns(4)
    col_views.metric("Visualizações", f"{stats.stats.views:,}".replace(",", "."))
    col_whatsapp.metric("Cliques no WhatsApp", f"{stats.stats.whatsapp_clicks:,}".replace(",", "."))
    col_phone.metric("Cliques no telefone", f"{stats.stats.phone_clicks:,}".replace(",", "."))
    col_fav.metric("Favoritos", f"{stats.stats.favorites:,}".replace(",", "."))

    if stats.stats.views > 0:
        st.markdown("**Taxa de conversão**")
        st.progress(min(stats.stats.conversion_rate, 100) / 100)
        st.caption(f"{stats.stats.conversion_rate}% dos visitantes entraram em contato")
