"""
Photo gallery manager.

Upload, delete and reorder photos. The first photo is the cover.
"""

import streamlit as st

from utils.auth import require_auth
from utils.state import get_api, get_session, init_session_state, run
from vitrine.api_client import APIError
from vitrine.core.config import get_settings
from vitrine.schemas.profile import PhotoFile
from vitrine.services.profile import PhotoManager, ProfileService

st.set_page_config(page_title="Minhas Fotos - Vitrine", page_icon="📷", layout="wide")

init_session_state()
session = get_session()

st.title("📷 Minhas Fotos")

if not require_auth(session):
    st.stop()

api = get_api()
max_mb = get_settings().MAX_UPLOAD_BYTES // (1024 * 1024)

if "photo_manager" not in st.session_state:
    try:
        with st.spinner("Carregando fotos..."):
            listing = run(ProfileService(api, session).load())
    except APIError as e:
        st.error(f"Erro ao carregar fotos: {e.message}")
        st.stop()
    st.session_state.photo_manager = PhotoManager(api, session, listing.gallery if listing else [])

manager: PhotoManager = st.session_state.photo_manager

uploads = st.file_uploader(
    f"JPG, PNG ou WebP. Máximo {max_mb}MB por foto.",
    type=["jpg", "jpeg", "png", "webp"],
    accept_multiple_files=True,
)

if uploads and st.button("Enviar fotos", type="primary"):
    files = [
        PhotoFile(filename=f.name, content=f.getvalue(), content_type=f.type or "")
        for f in uploads
    ]
    try:
        with st.spinner("Enviando..."):
            report = run(manager.upload_batch(files))
    except APIError as e:
        st.error(e.message)
    else:
        for rejected in report.rejected:
            st.error(f"{rejected.filename}: {rejected.reason}")
        if report.uploaded:
            st.success(f"{len(report.uploaded)} foto(s) enviada(s)!")
        if report.gallery_error:
            st.warning(f"Fotos enviadas, mas a ordem da galeria não foi salva: {report.gallery_error}")

st.divider()

if not manager.photos:
    st.info("Você ainda não tem fotos. Adicione fotos para deixar seu perfil mais atrativo.")
    st.stop()

cols = st.columns(4)
for index, photo in enumerate(manager.photos):
    with cols[index % 4]:
        with st.container(border=True):
            st.image(photo.medium or photo.thumbnail, use_container_width=True)
            if index == 0:
                st.caption("⭐ Foto de capa")

            col_left, col_right, col_delete = st.columns(3)
            try:
                with col_left:
                    if st.button("⬅️", key=f"left_{photo.id}", disabled=index == 0):
                        run(manager.move(index, index - 1))
                        st.rerun()
                with col_right:
                    if st.button("➡️", key=f"right_{photo.id}", disabled=index == len(manager.photos) - 1):
                        run(manager.move(index, index + 1))
                        st.rerun()
                with col_delete:
                    if st.button("🗑️", key=f"delete_{photo.id}"):
                        run(manager.delete(photo.id))
                        st.rerun()
            except APIError as e:
                st.error(e.message or "Erro ao atualizar galeria")
