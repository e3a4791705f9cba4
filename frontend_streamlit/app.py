"""
Vitrine - Frontend Streamlit

Main entry point for the Streamlit application.
Public browsing of listings plus the provider self-service area.
"""

import streamlit as st

from utils.state import get_session, init_session_state
from vitrine.core.config import get_settings

settings = get_settings()

st.set_page_config(
    page_title=settings.APP_NAME,
    page_icon="💎",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()
session = get_session()

with st.sidebar:
    st.title(f"💎 {settings.APP_NAME}")
    st.caption("Anúncios de prestadores de serviço")

    st.divider()

    if session.is_authenticated:
        st.success(f"👤 {session.user.name}")
        st.caption(session.user.email)

        if st.button("🚪 Sair", use_container_width=True):
            session.logout()
            st.rerun()
    else:
        st.warning("Não autenticado")
        st.page_link("pages/1_Login.py", label="Entrar / Anunciar", icon="🔐")

    st.divider()

    st.subheader("📖 Navegação")

    st.page_link("pages/2_Listings.py", label="Anúncios", icon="🔍")
    st.page_link("pages/7_Plans.py", label="Planos", icon="⭐")

    if session.is_authenticated:
        st.divider()
        st.caption("Minha conta")
        st.page_link("pages/4_Dashboard.py", label="Dashboard", icon="📊")
        st.page_link("pages/5_My_Profile.py", label="Meu Perfil", icon="📝")
        st.page_link("pages/6_Photos.py", label="Minhas Fotos", icon="📷")

        if session.is_admin:
            st.divider()
            st.caption("Administração")
            st.page_link("pages/8_Admin.py", label="Moderação", icon="⚙️")

st.title(f"💎 Bem-vindo à {settings.APP_NAME}")

st.markdown("""
### Para quem procura
- 🔍 **Anúncios**: Filtre por cidade, categoria, preço e disponibilidade
- ✅ **Verificadas**: Perfis com documentos conferidos
- 💬 **Contato direto**: WhatsApp ou telefone em um clique

### Para quem anuncia
- 📝 **Perfil**: Cadastre seus dados, valores e serviços
- 📷 **Fotos**: Monte sua galeria; a primeira foto é a capa
- 📊 **Dashboard**: Acompanhe visualizações e cliques
- ⭐ **Planos**: Premium e VIP aparecem primeiro
""")

col1, col2 = st.columns(2)

with col1:
    st.page_link(
        "pages/2_Listings.py",
        label="🔍 Ver anúncios",
        use_container_width=True,
    )

with col2:
    if session.is_authenticated:
        st.page_link(
            "pages/4_Dashboard.py",
            label="📊 Meu dashboard",
            use_container_width=True,
        )
    else:
        st.page_link(
            "pages/1_Login.py",
            label="📝 Anunciar",
            use_container_width=True,
        )

st.divider()

st.caption(f"{settings.APP_NAME} - Marketplace de anúncios")
