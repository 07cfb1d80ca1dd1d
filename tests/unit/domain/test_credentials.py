"""Tests for Credentials and Session value objects."""

import dataclasses

import pytest

from tidalhifi.domain.exceptions import AuthenticationError, ConfigurationError
from tidalhifi.domain.value_objects import Credentials, Session


class TestCredentials:
    """Test credential validation."""

    def test_valid_credentials(self) -> None:
        """All four string fields are accepted."""
        creds = Credentials(
            username="user", password="pass", token="tok", quality="HIGH"
        )
        assert creds.username == "user"
        assert creds.quality == "HIGH"

    def test_password_and_token_hidden_from_repr(self) -> None:
        """Secrets must not end up in logs via repr()."""
        creds = Credentials(
            username="user", password="s3cret", token="t0ken", quality="HIGH"
        )
        assert "s3cret" not in repr(creds)
        assert "t0ken" not in repr(creds)

    def test_credentials_are_immutable(self) -> None:
        """Credentials can't be changed after construction."""
        creds = Credentials(
            username="user", password="pass", token="tok", quality="HIGH"
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            creds.username = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("missing", "message"),
        [
            ("username", "Username invalid or missing"),
            ("password", "Password invalid or missing"),
            ("token", "Token invalid or missing"),
            ("quality", "Stream quality invalid or missing"),
        ],
    )
    def test_missing_field_has_its_own_error(self, missing: str, message: str) -> None:
        """Every missing field is reported with a distinct message."""
        data = {
            "username": "user",
            "password": "pass",
            "token": "tok",
            "quality": "HIGH",
        }
        del data[missing]

        with pytest.raises(ConfigurationError) as exc_info:
            Credentials.from_mapping(data)

        assert exc_info.value.message == message

    def test_non_string_field_rejected(self) -> None:
        """A field of the wrong type is treated like a missing one."""
        with pytest.raises(ConfigurationError, match="Token invalid or missing"):
            Credentials.from_mapping(
                {"username": "user", "password": "pass", "token": 123, "quality": "HIGH"}
            )

    @pytest.mark.parametrize("data", [None, "user:pass", 42, ["user", "pass"]])
    def test_non_mapping_rejected(self, data: object) -> None:
        """Auth data that isn't a mapping fails before any field check."""
        with pytest.raises(ConfigurationError, match="must pass auth data"):
            Credentials.from_mapping(data)


class TestSession:
    """Test building sessions from login responses."""

    def test_from_login_response(self) -> None:
        """Session takes ids from TIDAL and quality from the caller."""
        session = Session.from_login_response(
            {"sessionId": "S1", "userId": 42, "countryCode": "US"}, "LOSSLESS"
        )
        assert session == Session(
            session_id="S1", user_id=42, country_code="US", stream_quality="LOSSLESS"
        )

    def test_missing_session_id_rejected(self) -> None:
        """A login response without sessionId can't produce a usable session."""
        with pytest.raises(AuthenticationError):
            Session.from_login_response({"userId": 42, "countryCode": "US"}, "HIGH")
