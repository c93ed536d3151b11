import pytest
from unittest.mock import patch
from sqlalchemy.exc import IntegrityError, OperationalError

from errors import Conflict, InvalidCredentials, StoreError, ValidationError
from helpers.tokens import decode_access_token
from models.user import User
from services.identity_service import authenticate_user, register_user


# --- Test Constants ---
class TestConstants:
    USERNAME = "alice"
    PASSWORD = "p1"
    LONG_PASSWORD = "correct horse battery staple " * 4


@pytest.mark.integration
class TestRegisterUser:
    """Tests for register_user."""

    def test_creates_user_with_hashed_password(self, session):
        user = register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        stored = User.find_by_username(TestConstants.USERNAME)
        assert stored.id == user.id
        assert stored.password_hash != TestConstants.PASSWORD
        assert stored.check_password(TestConstants.PASSWORD)

    def test_duplicate_username_conflicts(self, session):
        register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        with pytest.raises(Conflict, match="User already exists"):
            register_user(TestConstants.USERNAME, "p2")

        assert User.query.count() == 1

    def test_unique_constraint_race_maps_to_conflict(self, session):
        with patch.object(User, "find_by_username", return_value=None):
            with patch(
                "services.identity_service.db.session.commit",
                side_effect=IntegrityError("INSERT", {}, Exception("unique")),
            ):
                with pytest.raises(Conflict):
                    register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

    def test_store_failure_maps_to_store_error(self, session):
        with patch.object(
            User, "find_by_username", side_effect=OperationalError("SELECT", {}, None)
        ):
            with pytest.raises(StoreError, match="Error during signup"):
                register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

    @pytest.mark.parametrize(
        "username,password",
        [
            (None, "p1"),
            ("alice", None),
            ("", "p1"),
            ("alice", ""),
            ("   ", "p1"),
            (123, "p1"),
            ("alice", ["p1"]),
        ],
    )
    def test_missing_fields_are_rejected(self, session, username, password):
        with pytest.raises(ValidationError, match="Username and password are required"):
            register_user(username, password)


@pytest.mark.integration
class TestAuthenticateUser:
    """Tests for authenticate_user."""

    def test_returns_token_for_user(self, app, session):
        user = register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        token = authenticate_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        assert decode_access_token(token, app.config["JWT_SECRET_KEY"]) == user.id

    def test_wrong_password_and_unknown_user_fail_identically(self, session):
        register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        with pytest.raises(InvalidCredentials) as wrong_password:
            authenticate_user(TestConstants.USERNAME, "wrong")
        with pytest.raises(InvalidCredentials) as unknown_user:
            authenticate_user("mallory", TestConstants.PASSWORD)

        assert wrong_password.value.message == unknown_user.value.message
        assert wrong_password.value.status_code == unknown_user.value.status_code == 401

    def test_long_password_round_trip(self, session):
        register_user(TestConstants.USERNAME, TestConstants.LONG_PASSWORD)

        assert authenticate_user(TestConstants.USERNAME, TestConstants.LONG_PASSWORD)

    def test_long_wrong_password_is_rejected(self, session):
        register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        with pytest.raises(InvalidCredentials):
            authenticate_user(TestConstants.USERNAME, "z" * 100)

    def test_username_match_is_case_sensitive(self, session):
        register_user(TestConstants.USERNAME, TestConstants.PASSWORD)

        with pytest.raises(InvalidCredentials):
            authenticate_user("ALICE", TestConstants.PASSWORD)

    def test_store_failure_maps_to_store_error(self, session):
        with patch.object(
            User, "find_by_username", side_effect=OperationalError("SELECT", {}, None)
        ):
            with pytest.raises(StoreError, match="Error during signin"):
                authenticate_user(TestConstants.USERNAME, TestConstants.PASSWORD)

    def test_missing_fields_are_rejected(self, session):
        with pytest.raises(ValidationError):
            authenticate_user(TestConstants.USERNAME, None)
