"""
Testes unitários para as validações de formulário e de upload.
"""

import pytest

from vitrine.schemas.user import RegistrationForm
from vitrine.utils.validators import (
    is_valid_email,
    is_valid_phone,
    only_digits,
    parse_optional_int,
    validate_image,
    validate_registration,
)

MB = 1024 * 1024


class TestPhoneAndEmail:

    @pytest.mark.parametrize(
        "phone,valid",
        [
            ("2133334444", True),
            ("21999999999", True),
            ("(21) 99999-9999", True),
            ("213333444", False),
            ("219999999999", False),
            ("", False),
        ],
    )
    def test_is_valid_phone(self, phone, valid):
        """Exatamente 10 ou 11 dígitos."""
        assert is_valid_phone(phone) is valid

    @pytest.mark.parametrize(
        "email,valid",
        [
            ("ana@example.com", True),
            ("ana.souza@mail.com.br", True),
            ("ana@example", False),
            ("ana example@x.com", False),
            ("", False),
        ],
    )
    def test_is_valid_email(self, email, valid):
        assert is_valid_email(email) is valid

    def test_only_digits(self):
        assert only_digits("(21) 99999-9999") == "21999999999"
        assert only_digits(None) == ""


class TestValidateRegistration:
    """A primeira regra violada define a mensagem."""

    @pytest.fixture
    def form(self) -> RegistrationForm:
        return RegistrationForm(
            name="Ana Souza",
            email="ana@example.com",
            password="segredo123",
            confirm_password="segredo123",
            accept_terms=True,
        )

    def test_valid(self, form):
        assert validate_registration(form) is None

    @pytest.mark.parametrize(
        "update,message",
        [
            ({"email": ""}, "Preencha todos os campos obrigatórios"),
            ({"name": "Al"}, "Nome deve ter pelo menos 3 caracteres"),
            ({"email": "ana@"}, "E-mail inválido"),
            ({"whatsapp": "9999"}, "WhatsApp inválido"),
            ({"password": "abc12", "confirm_password": "abc12"}, "A senha deve ter pelo menos 6 caracteres"),
            ({"confirm_password": "outra123"}, "As senhas não conferem"),
            ({"accept_terms": False}, "Você precisa aceitar os termos de uso"),
        ],
    )
    def test_messages(self, form, update, message):
        assert validate_registration(form.model_copy(update=update)) == message

    def test_whatsapp_is_optional(self, form):
        assert validate_registration(form.model_copy(update={"whatsapp": ""})) is None


class TestValidateImage:

    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/jpg", "image/png", "image/webp"])
    def test_allowed_types(self, content_type):
        assert validate_image(1 * MB, content_type) is None

    def test_rejects_other_types(self):
        assert validate_image(1 * MB, "image/gif") == "Formato não permitido. Use JPG, PNG ou WebP."

    def test_rejects_over_5mb(self):
        assert validate_image(6 * MB, "image/jpeg") == "Arquivo muito grande. Máximo 5MB."

    def test_exactly_5mb_is_allowed(self):
        assert validate_image(5 * MB, "image/png") is None


class TestParseOptionalInt:

    def test_empty_is_none(self):
        assert parse_optional_int("") is None
        assert parse_optional_int("   ") is None

    def test_number(self):
        assert parse_optional_int(" 168 ") == 168

    def test_text_raises(self):
        with pytest.raises(ValueError):
            parse_optional_int("alta")
