"""
Login, registration and password recovery page.
"""

import streamlit as st

from utils.state import get_session, init_session_state, run
from vitrine.schemas.user import RegistrationForm

st.set_page_config(page_title="Entrar - Vitrine", page_icon="🔐", layout="centered")

init_session_state()
session = get_session()

st.title("🔐 Área do Anunciante")

if session.is_authenticated:
    st.success(f"Você está logado como **{session.user.name}**")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("📊 Ir para o Dashboard", use_container_width=True):
            st.switch_page("pages/4_Dashboard.py")
    with col2:
        if st.button("🚪 Sair", use_container_width=True, type="secondary"):
            session.logout()
            st.rerun()

    st.stop()

tab_login, tab_signup, tab_forgot = st.tabs(["Entrar", "Criar Conta", "Esqueci a senha"])

with tab_login:
    with st.form("login_form"):
        email = st.text_input("E-mail", placeholder="seu@email.com")
        password = st.text_input("Senha", type="password", placeholder="••••••••")

        submitted = st.form_submit_button("Entrar", use_container_width=True)

        if submitted:
            with st.spinner("Autenticando..."):
                result = run(session.login(email, password))

            if result.success:
                st.success(result.message or "Login realizado com sucesso")
                st.switch_page("pages/4_Dashboard.py")
            else:
                st.error(result.message)

with tab_signup:
    with st.form("signup_form"):
        name = st.text_input("Nome artístico *", placeholder="Como quer ser chamada")
        signup_email = st.text_input("E-mail *", placeholder="seu@email.com", key="signup_email")
        whatsapp = st.text_input("WhatsApp", placeholder="(21) 99999-9999")
        signup_password = st.text_input(
            "Senha *",
            type="password",
            placeholder="Mínimo 6 caracteres",
            key="signup_password",
        )
        confirm_password = st.text_input(
            "Confirmar senha *",
            type="password",
            placeholder="Digite a senha novamente",
        )
        accept_terms = st.checkbox("Aceito os termos de uso")

        submitted = st.form_submit_button("Criar conta", use_container_width=True)

        if submitted:
            form = RegistrationForm(
                name=name,
                email=signup_email,
                whatsapp=whatsapp,
                password=signup_password,
                confirm_password=confirm_password,
                accept_terms=accept_terms,
            )
            with st.spinner("Criando conta..."):
                result = run(session.register(form))

            if result.success:
                st.success(result.message or "Conta criada com sucesso!")
                st.switch_page("pages/5_My_Profile.py")
            else:
                st.error(result.message)

with tab_forgot:
    with st.form("forgot_form"):
        forgot_email = st.text_input("E-mail cadastrado", key="forgot_email")
        submitted = st.form_submit_button("Enviar link de recuperação", use_container_width=True)

        if submitted:
            with st.spinner("Enviando..."):
                result = run(session.request_password_reset(forgot_email))

            if result.success:
                st.success(result.message or "Verifique sua caixa de entrada.")
            else:
                st.error(result.message)
