"""Unit tests for AuthenticationService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from postboard.application.dtos import UserDTO
from postboard.application.services import AuthenticationService
from postboard.domain.shared import (
    InternalError,
    PersistenceError,
    PersistenceErrorKind,
)
from postboard.domain.user import EmailAlreadyExistsError, User, UserNotFoundError
from postboard_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    MalformedPasswordHashError,
    PasswordHashingService,
    WeakPasswordError,
)

TEST_EMAIL = "a@x.com"
TEST_NAME = "A"
TEST_PASSWORD = "pw123456"
NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def _stored_user(user_id: int = 1, password_hash: str = "hashed_password") -> User:
    return User.reconstitute(
        id=user_id,
        email=TEST_EMAIL,
        name=TEST_NAME,
        password_hash=password_hash,
        created_at=NOW,
        updated_at=NOW,
    )


def _with_id(user: User) -> User:
    """Mimic the repository assigning an id on insert."""
    return User.reconstitute(
        id=1,
        email=user.email,
        name=user.name,
        password_hash=user.password_hash,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class TestAuthenticationServiceRegister:
    """Tests for user registration."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.jwt_service = Mock(spec=JWTService)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_register_creates_user(self):
        """Test that register hashes the password and stores the user."""
        # Arrange
        self.password_service.hash.return_value = "hashed_password"
        self.user_repo.add.side_effect = _with_id

        # Act
        result = await self.service.register(
            email=TEST_EMAIL,
            name=TEST_NAME,
            password=TEST_PASSWORD,
        )

        # Assert
        assert isinstance(result, UserDTO)
        assert result.id == 1
        assert result.email == TEST_EMAIL
        assert result.name == TEST_NAME
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        stored = self.user_repo.add.call_args.args[0]
        assert stored.password_hash == "hashed_password"

    @pytest.mark.asyncio
    async def test_register_view_has_no_credential(self):
        """Test that the returned view carries no password or hash."""
        self.password_service.hash.return_value = "hashed_password"
        self.user_repo.add.side_effect = _with_id

        result = await self.service.register(TEST_EMAIL, TEST_NAME, TEST_PASSWORD)

        assert not hasattr(result, "password")
        assert not hasattr(result, "password_hash")

    @pytest.mark.asyncio
    async def test_register_raises_when_email_exists(self):
        """Test that a unique violation becomes EmailAlreadyExistsError."""
        # Arrange
        self.password_service.hash.return_value = "hashed_password"
        self.user_repo.add.side_effect = PersistenceError(
            PersistenceErrorKind.UNIQUE_VIOLATION,
            entity="User",
        )

        # Act & Assert
        with pytest.raises(EmailAlreadyExistsError, match="Email already registered"):
            await self.service.register(TEST_EMAIL, TEST_NAME, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_register_other_failure_is_internal(self):
        """Test that an unclassified failure becomes InternalError."""
        self.password_service.hash.return_value = "hashed_password"
        self.user_repo.add.side_effect = PersistenceError(
            PersistenceErrorKind.OTHER,
            "connection refused",
        )

        with pytest.raises(InternalError) as exc_info:
            await self.service.register(TEST_EMAIL, TEST_NAME, TEST_PASSWORD)

        assert "connection refused" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_register_raises_for_weak_password(self):
        """Test that register raises WeakPasswordError for weak password."""
        # Arrange
        self.password_service.hash.side_effect = WeakPasswordError("Too short")

        # Act & Assert
        with pytest.raises(WeakPasswordError):
            await self.service.register(TEST_EMAIL, TEST_NAME, "short")

        # User should not be created
        self.user_repo.add.assert_not_called()


class TestAuthenticationServiceLogin:
    """Tests for user login."""

    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.jwt_service = Mock(spec=JWTService)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )
        self.password_service.needs_rehash.return_value = False

    @pytest.mark.asyncio
    async def test_login_returns_token(self):
        """Test that login returns a token for valid credentials."""
        # Arrange
        self.user_repo.find_by_email.return_value = _stored_user()
        self.password_service.verify.return_value = True
        self.jwt_service.create_access_token.return_value = "access_token"

        # Act
        token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        # Assert
        assert token == "access_token"
        self.password_service.verify.assert_called_once_with(
            TEST_PASSWORD,
            "hashed_password",
        )
        self.jwt_service.create_access_token.assert_called_once_with(
            user_id=1,
            email=TEST_EMAIL,
            name=TEST_NAME,
        )

    @pytest.mark.asyncio
    async def test_login_unknown_email_raises_not_found(self):
        """Test that an unknown email is reported as a missing user."""
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError, match="User not found"):
            await self.service.login("nobody@x.com", TEST_PASSWORD)

        self.password_service.verify.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_wrong_password_raises(self):
        """Test that a wrong password raises InvalidCredentialsError."""
        self.user_repo.find_by_email.return_value = _stored_user()
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
            await self.service.login(TEST_EMAIL, "wrong")

        self.jwt_service.create_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_lookup_failure_is_internal(self):
        """Test that a failed lookup becomes InternalError."""
        self.user_repo.find_by_email.side_effect = PersistenceError(
            PersistenceErrorKind.OTHER,
        )

        with pytest.raises(InternalError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_login_malformed_hash_propagates(self):
        """Test that a corrupt stored digest is not treated as a mismatch."""
        self.user_repo.find_by_email.return_value = _stored_user(
            password_hash="corrupt",
        )
        self.password_service.verify.side_effect = MalformedPasswordHashError()

        with pytest.raises(MalformedPasswordHashError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_login_does_not_rehash_current_digest(self):
        """Test that a digest with the current work factor is left alone."""
        self.user_repo.find_by_email.return_value = _stored_user()
        self.password_service.verify.return_value = True

        await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        self.password_service.hash.assert_not_called()
        self.user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_rehashes_outdated_digest(self):
        """Test that a digest with an old work factor is replaced on login."""
        # Arrange
        self.user_repo.find_by_email.return_value = _stored_user(
            password_hash="old_hash",
        )
        self.password_service.verify.return_value = True
        self.password_service.needs_rehash.return_value = True
        self.password_service.hash.return_value = "new_hash"
        self.jwt_service.create_access_token.return_value = "access_token"

        # Act
        token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        # Assert
        assert token == "access_token"
        self.password_service.needs_rehash.assert_called_once_with("old_hash")
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.user_repo.update.assert_awaited_once()
        updated = self.user_repo.update.call_args.args[0]
        assert updated.password_hash == "new_hash"

    @pytest.mark.asyncio
    async def test_login_rehash_skipped_for_wrong_password(self):
        """Test that a failed login never rewrites the stored digest."""
        self.user_repo.find_by_email.return_value = _stored_user()
        self.password_service.verify.return_value = False
        self.password_service.needs_rehash.return_value = True

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong")

        self.user_repo.update.assert_not_called()


class TestAuthenticationServiceTokens:
    """Tests for token verification."""

    def test_verify_token_delegates_to_jwt_service(self):
        """Test that verify_token returns the decoded payload."""
        jwt_service = JWTService(
            secret_key="test-secret-key-that-is-long-enough-for-hs256",
        )
        service = AuthenticationService(
            user_repository=AsyncMock(),
            password_service=Mock(spec=PasswordHashingService),
            jwt_service=jwt_service,
        )
        token = jwt_service.create_access_token(1, TEST_EMAIL, TEST_NAME)

        payload = service.verify_token(token)

        assert payload.user_id == 1
        assert payload.email == TEST_EMAIL

    def test_verify_token_rejects_garbage(self):
        """Test that an invalid token raises InvalidTokenError."""
        service = AuthenticationService(
            user_repository=AsyncMock(),
            password_service=Mock(spec=PasswordHashingService),
            jwt_service=JWTService(secret_key="another-test-secret-long-enough-1234"),
        )

        with pytest.raises(InvalidTokenError):
            service.verify_token("not-a-token")
