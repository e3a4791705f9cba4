"""
Provider self-service: profile editing and photo gallery.
"""

import logging
from typing import Iterable, List, Optional

from vitrine.api_client import APIClient, APIError, parse_as
from vitrine.schemas.base import MessageResponse
from vitrine.schemas.listing import OwnedListing, Photo
from vitrine.schemas.profile import PhotoFile, ProfileForm, RejectedFile, UploadReport
from vitrine.services.session import SessionManager
from vitrine.utils.validators import validate_image

logger = logging.getLogger(__name__)


class ProfileService:
    """Reads and saves the provider's own listing."""

    def __init__(self, api: APIClient, session: SessionManager):
        self.api = api
        self.session = session

    async def load(self) -> Optional[OwnedListing]:
        """
        Load the provider's listing.

        Returns:
            The listing, or None when the provider has none yet
        """
        data = await self.api.get("meu-perfil", token=self.session.require_token())
        if not isinstance(data, dict) or not data.get("existe") or not data.get("perfil"):
            return None
        return parse_as(OwnedListing, data["perfil"])

    async def save(self, form: ProfileForm) -> MessageResponse:
        """
        Validate and submit the profile form.

        The form is converted into the typed payload before anything is
        sent; the user record is re-fetched after a successful save.

        Raises:
            FormValidationError: Invalid form values (no request is made)
            APIError: Request failed or backend refused the save
        """
        payload = form.to_payload()
        token = self.session.require_token()

        data = await self.api.post("meu-perfil", json=payload.to_wire(), token=token)
        result = parse_as(MessageResponse, data)
        if not result.success:
            raise APIError(result.message or "Erro ao salvar perfil", 0, detail=data)

        await self.session.refresh()
        return result

    async def save_gallery(self, photo_ids: Iterable[int]) -> None:
        """Persist gallery order; the first id is the cover photo."""
        galeria = ",".join(str(photo_id) for photo_id in photo_ids)
        await self.api.post(
            "meu-perfil",
            json={"galeria": galeria},
            token=self.session.require_token(),
        )


class PhotoManager:
    """
    Local gallery state for the photo page.

    Keeps the ordered photo list and persists the order after every change.
    """

    def __init__(
        self,
        api: APIClient,
        session: SessionManager,
        photos: Optional[List[Photo]] = None,
    ):
        self.api = api
        self.session = session
        self.profile = ProfileService(api, session)
        self.photos: List[Photo] = list(photos or [])

    @property
    def cover(self) -> Optional[Photo]:
        return self.photos[0] if self.photos else None

    @property
    def photo_ids(self) -> List[int]:
        return [photo.id for photo in self.photos]

    async def upload_batch(self, files: Iterable[PhotoFile]) -> UploadReport:
        """
        Upload a batch of photos.

        Each file is validated (type and size) before its upload call;
        an offending file is skipped and the rest of the batch goes on.
        """
        token = self.session.require_token()
        report = UploadReport()

        for file in files:
            reason = validate_image(file.size, file.content_type)
            if reason:
                logger.info(f"Foto {file.filename} recusada no cliente: {reason}")
                report.rejected.append(RejectedFile(filename=file.filename, reason=reason))
                continue

            try:
                data = await self.api.upload(
                    "upload",
                    "foto",
                    file.filename,
                    file.content,
                    file.content_type,
                    token=token,
                )
            except APIError as e:
                report.rejected.append(RejectedFile(filename=file.filename, reason=e.message))
                continue

            if not isinstance(data, dict) or not data.get("success") or not data.get("id"):
                report.rejected.append(
                    RejectedFile(filename=file.filename, reason="Erro ao fazer upload")
                )
                continue

            report.uploaded.append(Photo.from_upload(data))

        if report.uploaded:
            self.photos.extend(report.uploaded)
            try:
                await self.profile.save_gallery(self.photo_ids)
            except APIError as e:
                # Photos are already on the server; only their order went unsaved
                logger.warning(f"Erro ao salvar ordem da galeria: {e.message}")
                report.gallery_error = e.message

        return report

    async def delete(self, photo_id: int) -> None:
        """
        Delete a photo on the backend and drop it from the gallery.

        Once the backend delete succeeds the photo leaves the local list,
        even if persisting the new order then fails.
        """
        await self.api.delete(f"upload/{photo_id}", token=self.session.require_token())
        self.photos = [photo for photo in self.photos if photo.id != photo_id]
        await self.profile.save_gallery(self.photo_ids)

    async def move(self, from_index: int, to_index: int) -> None:
        """
        Move a photo within the gallery and persist the new order.

        The local order is restored when the backend refuses the new one.
        """
        previous = list(self.photos)
        photo = self.photos.pop(from_index)
        self.photos.insert(to_index, photo)
        try:
            await self.profile.save_gallery(self.photo_ids)
        except APIError:
            self.photos = previous
            raise
