"""
Profile editor.

The provider fills the listing data; values are converted and validated
before anything is sent.
"""

import asyncio

import streamlit as st

from utils.auth import require_auth
from utils.state import get_api, get_session, init_session_state, run
from vitrine.api_client import APIError
from vitrine.schemas.profile import ProfileForm
from vitrine.services.catalog import CatalogService
from vitrine.services.profile import ProfileService
from vitrine.utils.formatters import format_status
from vitrine.utils.validators import FormValidationError

STATES = [
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
    "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
]

st.set_page_config(page_title="Meu Perfil - Vitrine", page_icon="📝", layout="wide")

init_session_state()
session = get_session()

st.title("📝 Meu Perfil")

if not require_auth(session):
    st.stop()

api = get_api()
profile_service = ProfileService(api, session)


async def load_data():
    return await asyncio.gather(CatalogService(api).load_all(), profile_service.load())


try:
    with st.spinner("Carregando perfil..."):
        taxonomies, listing = run(load_data())
except APIError as e:
    st.error(f"Erro ao carregar perfil: {e.message}")
    st.stop()

if listing:
    label, color = format_status(listing.status, "moderation")
    st.markdown(f"Status: :{color}[{label}]")
    current = ProfileForm.from_listing(listing)
else:
    st.info("Preencha os dados abaixo. Seu anúncio passa por análise antes de ser publicado.")
    current = ProfileForm()


def id_select(label: str, items: list, current_id: str, key: str) -> str:
    """Selectbox over a taxonomy; returns the chosen id as form text."""
    options = {"": "Selecione"} | {str(item.id): item.name for item in items}
    index = list(options).index(current_id) if current_id in options else 0
    return st.selectbox(label, list(options), index=index, format_func=options.get, key=key)


with st.form("profile_form"):
    st.subheader("Dados básicos")
    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Nome artístico", value=current.name)
        birth_date = st.text_input("Data de nascimento (AAAA-MM-DD)", value=current.birth_date)
    with col2:
        headline = st.text_input("Frase de destaque", value=current.headline)
        category_id = id_select("Categoria", taxonomies["categories"], current.category_id, "category_id")
    description = st.text_area("Sobre você", value=current.description, height=150)

    st.subheader("Localização")
    col1, col2, col3 = st.columns(3)
    with col1:
        state = st.selectbox(
            "Estado",
            STATES,
            index=STATES.index(current.state) if current.state in STATES else STATES.index("RJ"),
        )
    with col2:
        city_id = id_select("Cidade", taxonomies["cities"], current.city_id, "city_id")
    with col3:
        neighborhood_id = id_select("Bairro", taxonomies["neighborhoods"], current.neighborhood_id, "neighborhood_id")
    serves_on_site = st.checkbox("Atende em local próprio", value=current.serves_on_site)

    st.subheader("Contato")
    col1, col2 = st.columns(2)
    with col1:
        whatsapp = st.text_input("WhatsApp", value=current.whatsapp)
    with col2:
        phone = st.text_input("Telefone", value=current.phone)

    st.subheader("Características")
    col1, col2, col3 = st.columns(3)
    with col1:
        height = st.text_input("Altura (cm)", value=current.height)
        weight = st.text_input("Peso (kg)", value=current.weight)
    with col2:
        measurements = st.text_input("Medidas", value=current.measurements)
        eye_color = st.text_input("Cor dos olhos", value=current.eye_color)
    with col3:
        hair_color = st.text_input("Cor do cabelo", value=current.hair_color)
        ethnicity = st.text_input("Etnia", value=current.ethnicity)
    silicone = st.text_input("Silicone", value=current.silicone)

    st.subheader("Valores")
    col1, col2, col3 = st.columns(3)
    with col1:
        hourly_rate = st.text_input("1 hora (R$)", value=current.hourly_rate)
    with col2:
        half_hour_rate = st.text_input("30 minutos (R$)", value=current.half_hour_rate)
    with col3:
        overnight_rate = st.text_input("Pernoite (R$)", value=current.overnight_rate)
    col1, col2 = st.columns(2)
    with col1:
        accepts_pix = st.checkbox("Aceita Pix", value=current.accepts_pix)
    with col2:
        accepts_card = st.checkbox("Aceita cartão", value=current.accepts_card)

    st.subheader("Serviços")
    service_names = {service.id: service.name for service in taxonomies["services"]}
    services = st.multiselect(
        "Serviços oferecidos",
        options=list(service_names),
        default=[sid for sid in current.services if sid in service_names],
        format_func=service_names.get,
    )

    submitted = st.form_submit_button("Salvar perfil", type="primary", use_container_width=True)

if submitted:
    form = ProfileForm(
        name=name,
        headline=headline,
        description=description,
        birth_date=birth_date,
        state=state,
        city_id=city_id,
        neighborhood_id=neighborhood_id,
        category_id=category_id,
        whatsapp=whatsapp,
        phone=phone,
        height=height,
        weight=weight,
        measurements=measurements,
        eye_color=eye_color,
        hair_color=hair_color,
        ethnicity=ethnicity,
        silicone=silicone,
        hourly_rate=hourly_rate,
        half_hour_rate=half_hour_rate,
        overnight_rate=overnight_rate,
        serves_on_site=serves_on_site,
        accepts_card=accepts_card,
        accepts_pix=accepts_pix,
        services=services,
    )

    try:
        with st.spinner("Salvando..."):
            result = run(profile_service.save(form))
        st.success(result.message or "Perfil salvo com sucesso!")
    except FormValidationError as e:
        for message in e.errors.values():
            st.error(message)
    except APIError as e:
        st.error(e.message or "Erro de conexão. Tente novamente.")
