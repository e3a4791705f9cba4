"""
Session manager - single source of truth for who is logged in.

Owns the bearer token and the user record, persists the token, and hands the
token out to the other services. Every consumer receives the manager
explicitly; there is no module-level instance.

State machine:
    anonymous -> (login/register ok) -> authenticated
    authenticated -> (logout | token rejected on restore) -> anonymous
"""

import logging
from typing import Optional

from vitrine.api_client import APIClient, APIError, parse_as
from vitrine.core.storage import TokenStore
from vitrine.schemas.user import AuthResponse, AuthResult, RegistrationForm, User
from vitrine.utils.validators import is_valid_email, validate_registration

logger = logging.getLogger(__name__)

SESSION_EXPIRED = "Sessão expirada. Faça login novamente."


class SessionManager:
    """Owns token + user; only this class mutates them."""

    def __init__(self, api: APIClient, store: TokenStore):
        self.api = api
        self.store = store
        self._token: Optional[str] = None
        self._user: Optional[User] = None
        # Stays True until restore() finishes, so pages show a loading state
        # instead of flashing the anonymous view
        self.loading = True

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None and self._user is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self._user.is_admin

    def require_token(self) -> str:
        """
        Token for an authenticated call.

        Raises:
            APIError 401: No active session
        """
        if not self._token:
            raise APIError(SESSION_EXPIRED, 401)
        return self._token

    async def _fetch_me(self, token: str) -> Optional[User]:
        """Call /auth/me; None when the backend returns no identity."""
        data = await self.api.get("auth/me", token=token)
        if not isinstance(data, dict) or not data.get("id"):
            return None
        return parse_as(User, data)

    def _set_session(self, token: str, user: User) -> None:
        self._token = token
        self._user = user
        self.store.save(token)

    def _clear_session(self) -> None:
        self._token = None
        self._user = None
        self.store.clear()

    async def restore(self) -> None:
        """
        Restore the session from the persisted token.

        A token the backend rejects (or any failure while validating it)
        demotes the session to anonymous; nothing is raised.
        """
        self.loading = True
        try:
            saved_token = self.store.load()
            if not saved_token:
                return

            try:
                user = await self._fetch_me(saved_token)
            except APIError as e:
                logger.warning(f"Falha ao validar token salvo: {e}")
                user = None

            if user is None:
                self._clear_session()
                return

            self._token = saved_token
            self._user = user
        finally:
            self.loading = False

    async def _authenticate(self, endpoint: str, payload: dict, default_error: str) -> AuthResult:
        self.loading = True
        try:
            data = await self.api.post(endpoint, json=payload)
            response = parse_as(AuthResponse, data)
        except APIError as e:
            logger.warning(f"{endpoint} falhou: {e.message}")
            return AuthResult.fail(e.message or default_error)
        finally:
            self.loading = False

        if response.success and response.token and response.user:
            self._set_session(response.token, response.user)
            return AuthResult.ok(response.message or "")

        return AuthResult.fail(response.message or default_error)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Authenticate with email and password.

        Returns:
            AuthResult; failures carry a human-readable reason
        """
        if not email or not password:
            return AuthResult.fail("Informe e-mail e senha")

        return await self._authenticate(
            "auth/login",
            {"email": email, "password": password},
            "Erro ao fazer login",
        )

    async def register(self, form: RegistrationForm) -> AuthResult:
        """
        Create a provider account and log it in.

        Every client-side validation runs before any network call.
        """
        error = validate_registration(form)
        if error:
            return AuthResult.fail(error)

        return await self._authenticate(
            "auth/register",
            form.to_payload(),
            "Erro ao criar conta",
        )

    def logout(self) -> None:
        """Clear the in-memory session and the persisted token."""
        self._clear_session()

    async def refresh(self) -> None:
        """Re-fetch the user record; no-op without a token."""
        if not self._token:
            return

        try:
            user = await self._fetch_me(self._token)
        except APIError as e:
            logger.warning(f"Erro ao atualizar usuário: {e}")
            return

        if user is not None:
            self._user = user

    async def request_password_reset(self, email: str) -> AuthResult:
        """Ask the backend to send a password-reset e-mail."""
        if not is_valid_email(email):
            return AuthResult.fail("E-mail inválido")

        try:
            data = await self.api.post("auth/forgot-password", json={"email": email})
        except APIError as e:
            return AuthResult.fail(e.message)

        data = data if isinstance(data, dict) else {}
        message = data.get("message") or ""
        if data.get("success"):
            return AuthResult.ok(message)
        return AuthResult.fail(message or "Erro ao enviar e-mail")
