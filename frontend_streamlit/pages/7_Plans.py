"""
Subscription plans.

Checkout happens on the payment provider's hosted page.
"""

import streamlit as st

from utils.auth import open_url
from utils.state import get_api, get_session, init_session_state, run
from vitrine.api_client import APIError
from vitrine.services.plans import PlanService
from vitrine.utils.formatters import format_currency, format_status

st.set_page_config(page_title="Planos - Vitrine", page_icon="⭐", layout="wide")

init_session_state()
session = get_session()
plan_service = PlanService(get_api(), session)

st.title("⭐ Planos")

try:
    with st.spinner("Carregando planos..."):
        plans = run(plan_service.list_plans())
except APIError as e:
    st.error(f"Erro ao carregar planos: {e.message}")
    st.stop()

if session.is_authenticated:
    label, _ = format_status(session.user.plan, "plan")
    st.caption(f"Seu plano atual: {label}")

if not plans:
    st.info("Nenhum plano disponível no momento.")
    st.stop()

cols = st.columns(len(plans))
for col, plan in zip(cols, plans):
    with col:
        with st.container(border=True):
            st.subheader(plan.name)
            st.markdown(f"## {format_currency(plan.price)}")
            st.caption(f"{plan.duration_days} dias")
            for benefit in plan.benefits:
                st.markdown(f"- {benefit}")

            if not session.is_authenticated:
                st.page_link("pages/1_Login.py", label="Entre para assinar", icon="🔐")
                continue

            if st.button("Assinar", key=f"plan_{plan.id}", type="primary", use_container_width=True):
                try:
                    with st.spinner("Criando pagamento..."):
                        checkout_url = run(plan_service.checkout(plan.id))
                except APIError as e:
                    st.error(e.message)
                else:
                    open_url(checkout_url, new_tab=False)
                    st.link_button("Ir para o pagamento", checkout_url)
