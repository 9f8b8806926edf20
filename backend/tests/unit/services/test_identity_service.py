"""Unit tests for the identity service."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from musicplayer.core.exceptions import BadRequest, Conflict, NotFound, Unauthorized
from musicplayer.core.security import verify_password
from musicplayer.db.models import User
from musicplayer.services import identity


class TestGetUser:
    def test_public_profile(self, db_session, test_user):
        profile = identity.get_user(db_session, test_user.id)

        assert profile.id == test_user.id
        assert profile.email == "test@example.com"
        assert profile.username == "testuser"
        assert "password_hash" not in profile.model_dump()

    def test_unknown_user(self, db_session):
        with pytest.raises(NotFound, match="User not found"):
            identity.get_user(db_session, 9999)


class TestSignup:
    def test_signup_hashes_password(self, db_session):
        profile = identity.signup(db_session, "New@Example.com", "newbie", "pa55word")

        user = db_session.get(User, profile.id)
        assert user.email == "new@example.com"
        assert user.password_hash != "pa55word"
        assert verify_password("pa55word", user.password_hash)

    @pytest.mark.parametrize(
        "email, username, password",
        [
            (None, "newbie", "pa55word"),
            ("new@example.com", None, "pa55word"),
            ("new@example.com", "  ", "pa55word"),
            ("new@example.com", "newbie", ""),
        ],
    )
    def test_missing_fields(self, db_session, email, username, password):
        with pytest.raises(BadRequest):
            identity.signup(db_session, email, username, password)

    def test_duplicate_email_any_case(self, db_session, test_user):
        with pytest.raises(Conflict, match="already registered"):
            identity.signup(db_session, "TEST@example.com", "someoneelse", "pa55word")

    def test_duplicate_username(self, db_session, test_user):
        with pytest.raises(Conflict, match="already taken"):
            identity.signup(db_session, "fresh@example.com", "testuser", "pa55word")

    def test_concurrent_signup_is_a_conflict(self):
        """A unique-index violation at commit time is reported as a conflict."""
        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.first.return_value = None
        mock_db.commit.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("duplicate key value")
        )

        with pytest.raises(Conflict, match="already taken"):
            identity.signup(mock_db, "race@example.com", "racer", "pa55word")

        mock_db.rollback.assert_called_once()


class TestLogin:
    def test_login_with_correct_password(self, db_session, test_user, test_password):
        profile = identity.login(db_session, "test@example.com", test_password)

        assert profile.id == test_user.id

    def test_email_lookup_is_case_insensitive(self, db_session, test_user, test_password):
        profile = identity.login(db_session, "  Test@Example.COM ", test_password)

        assert profile.id == test_user.id

    def test_unknown_email(self, db_session, test_user):
        with pytest.raises(Unauthorized, match="Invalid credentials"):
            identity.login(db_session, "nobody@example.com", "whatever")

    def test_wrong_password_is_rejected(self, db_session, test_user):
        """A known email no longer logs in with an arbitrary password."""
        with pytest.raises(Unauthorized, match="Invalid credentials"):
            identity.login(db_session, "test@example.com", "not-the-password")

    @pytest.mark.parametrize(
        "email, password", [(None, "x"), ("test@example.com", None), ("", "")]
    )
    def test_missing_fields(self, db_session, email, password):
        with pytest.raises(BadRequest, match="Email and password required"):
            identity.login(db_session, email, password)
