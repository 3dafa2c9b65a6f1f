"""
Unit tests for the signup, login and profile update schemas.
"""

import pytest

from notekeeper.core.schemas.auth import LoginRequest, SignupRequest, UserUpdateRequest


class TestAuthSchemas:
    def test_signup_normalizes_email_and_name(self):
        req = SignupRequest(name="  Ada ", email=" Ada@Example.COM ", password="p")
        assert req.name == "Ada"
        assert req.email == "ada@example.com"

    def test_signup_keeps_password_verbatim(self):
        req = SignupRequest(name="Ada", email="ada@example.com", password="  spaced  ")
        assert req.password == "  spaced  "

    @pytest.mark.parametrize("email", ["", "no-at-sign", "a@b", "a b@example.com"])
    def test_signup_rejects_bad_email(self, email):
        with pytest.raises(ValueError):
            SignupRequest(name="Ada", email=email, password="p")

    @pytest.mark.parametrize("field", ["name", "email", "password"])
    def test_signup_requires_every_field(self, field):
        data = {"name": "Ada", "email": "ada@example.com", "password": "p"}
        data.pop(field)
        with pytest.raises(ValueError):
            SignupRequest(**data)

    def test_login_lowercases_email(self):
        assert LoginRequest(email="ADA@example.com", password="p").email == "ada@example.com"

    def test_update_request_has_changes(self):
        assert not UserUpdateRequest().has_changes()
        assert UserUpdateRequest(name="Grace").has_changes()
