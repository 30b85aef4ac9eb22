"""Tests for the auth service."""

import jwt
import pytest

from shared.models import Role
from modules.auth.exceptions import (
    AdminRegistrationDisabledError,
    AuthConfigurationError,
    EmailAlreadyRegisteredError,
    ExpiredTokenError,
    InsufficientPermissionsError,
    InvalidCategorySelectionError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    StaleTokenError,
    SubscriptionRequiredError,
    TokenEpochConflictError,
    UserNotFoundError,
)
from modules.auth.models import AdminRegisterRequest, RegisterRequest
from modules.auth.repository import UserRepository
from modules.auth.service import AuthService
from modules.categories.repository import CategoryRepository
from modules.categories.service import CategoryService

from tests.factories import (
    TEST_PASSWORD,
    active_subscription,
    create_account,
    create_node,
    create_test_token,
    expired_subscription,
)


@pytest.fixture
def users(db) -> UserRepository:
    return UserRepository(db)


@pytest.fixture
def service(db, storage, settings, users) -> AuthService:
    categories = CategoryService(CategoryRepository(db), storage, settings)
    return AuthService(users, categories, settings)


def register_request(parent, sub, **overrides) -> RegisterRequest:
    data = {
        "name": "Asha",
        "email": "asha@example.com",
        "password": "secret123",
        "phone": "9999999999",
        "parent_category_id": parent.id if parent else None,
        "sub_category_id": sub.id if sub else None,
    }
    data.update(overrides)
    return RegisterRequest(**data)


class TestRegisterUser:
    @pytest.mark.asyncio
    async def test_register_user(self, service, users, category_pair):
        """Should store a user with a bcrypt hash and token_epoch 0."""
        parent, sub = category_pair

        response = await service.register_user(register_request(parent, sub))

        assert response.message == "User registered successfully"
        assert response.user.email == "asha@example.com"
        assert response.user.role == Role.USER

        stored = users.get_by_email("asha@example.com")
        assert stored.token_epoch == 0
        assert stored.password_hash.startswith("$2")
        assert stored.password_hash != "secret123"
        assert stored.parent_category_id == parent.id
        assert stored.sub_category_id == sub.id
        assert stored.subscription.is_subscribed is False

    @pytest.mark.asyncio
    async def test_register_normalizes_email(self, service, users, category_pair):
        parent, sub = category_pair
        await service.register_user(register_request(parent, sub, email="  Asha@Example.COM "))
        assert users.get_by_email("asha@example.com") is not None

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, service, category_pair):
        """Should raise EmailAlreadyRegisteredError for a taken email."""
        parent, sub = category_pair
        await service.register_user(register_request(parent, sub))

        with pytest.raises(EmailAlreadyRegisteredError):
            await service.register_user(register_request(parent, sub, email="ASHA@example.com"))

    @pytest.mark.asyncio
    async def test_register_requires_parent(self, service, category_pair):
        _, sub = category_pair
        with pytest.raises(InvalidCategorySelectionError) as exc_info:
            await service.register_user(register_request(None, sub))
        assert exc_info.value.details["field"] == "parent_category_id"

    @pytest.mark.asyncio
    async def test_register_requires_sub(self, service, category_pair):
        parent, _ = category_pair
        with pytest.raises(InvalidCategorySelectionError) as exc_info:
            await service.register_user(register_request(parent, None))
        assert exc_info.value.details["field"] == "sub_category_id"

    @pytest.mark.asyncio
    async def test_register_unknown_parent(self, service, category_pair):
        _, sub = category_pair
        with pytest.raises(InvalidCategorySelectionError, match="Invalid parent"):
            await service.register_user(register_request(
                None, sub, parent_category_id="8a6e0804-2bd0-4672-b79d-d97027f9071a"
            ))

    @pytest.mark.asyncio
    async def test_register_sub_must_belong_to_parent(self, service, db, category_pair):
        """A sub category from another branch should be rejected."""
        parent, _ = category_pair
        other_root = create_node(db, "Medicine")
        other_sub = create_node(db, "Anatomy", parent=other_root)

        with pytest.raises(InvalidCategorySelectionError, match="does not belong"):
            await service.register_user(register_request(parent, other_sub))

    @pytest.mark.asyncio
    async def test_register_admin(self, db, storage, settings, users):
        settings = settings.model_copy(update={"admin_registration_enabled": True})
        service = AuthService(users, CategoryService(CategoryRepository(db), storage, settings), settings)

        response = await service.register_admin(AdminRegisterRequest(
            name="Root", email="root@example.com", password="adminpass1",
        ))
        assert response.user.role == Role.ADMIN
        assert users.get_by_email("root@example.com").role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_register_admin_disabled_by_default(self, service, users):
        with pytest.raises(AdminRegistrationDisabledError):
            await service.register_admin(AdminRegisterRequest(
                name="Root", email="root@example.com", password="adminpass1",
            ))
        assert users.get_by_email("root@example.com") is None


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_issues_token_with_new_epoch(self, service, users, settings, db):
        """Login should bump the epoch and put it in the token."""
        account = create_account(db)

        response = await service.login("student@example.com", TEST_PASSWORD)

        claims = jwt.decode(response.access_token, settings.jwt_secret, algorithms=["HS256"])
        assert claims["sub"] == account.id
        assert claims["role"] == "user"
        assert claims["token_epoch"] == 1
        assert users.get_by_id(account.id).token_epoch == 1
        assert response.token_type == "bearer"
        assert response.user.email == "student@example.com"

    @pytest.mark.asyncio
    async def test_user_token_lifetime(self, service, db, settings):
        create_account(db)
        response = await service.login("student@example.com", TEST_PASSWORD)
        assert response.expires_in == settings.user_token_ttl_hours * 3600

    @pytest.mark.asyncio
    async def test_admin_token_lifetime(self, service, db):
        """Admin tokens should last 24 hours."""
        create_account(db, email="admin@example.com", role=Role.ADMIN)

        response = await service.login("admin@example.com", TEST_PASSWORD, role=Role.ADMIN)

        assert response.expires_in == 24 * 3600

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, service, db):
        create_account(db)
        with pytest.raises(InvalidCredentialsError):
            await service.login("student@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, service):
        """Unknown email should look the same as a wrong password."""
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await service.login("nobody@example.com", TEST_PASSWORD)
        assert exc_info.value.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_admin_login_rejects_users(self, service, db):
        create_account(db)
        with pytest.raises(InvalidCredentialsError):
            await service.login("student@example.com", TEST_PASSWORD, role=Role.ADMIN)

    @pytest.mark.asyncio
    async def test_login_invalidates_previous_token(self, service, db):
        """A second login should make the first token stale."""
        create_account(db)
        first = await service.login("student@example.com", TEST_PASSWORD)
        second = await service.login("student@example.com", TEST_PASSWORD)

        with pytest.raises(StaleTokenError):
            await service.authenticate(first.access_token)
        account = await service.authenticate(second.access_token)
        assert account.token_epoch == 2

    @pytest.mark.asyncio
    async def test_login_epoch_conflict(self, service, users, db, monkeypatch):
        create_account(db)
        monkeypatch.setattr(users, "increment_token_epoch", lambda user_id: None)

        with pytest.raises(TokenEpochConflictError):
            await service.login("student@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_login_without_secret(self, db, storage, settings, users):
        settings = settings.model_copy(update={"jwt_secret": ""})
        service = AuthService(users, CategoryService(CategoryRepository(db), storage, settings), settings)
        create_account(db)

        with pytest.raises(AuthConfigurationError):
            await service.login("student@example.com", TEST_PASSWORD)


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_invalidates_tokens(self, service, db):
        create_account(db)
        login = await service.login("student@example.com", TEST_PASSWORD)
        account = await service.authenticate(login.access_token)

        await service.logout(account.id)

        with pytest.raises(StaleTokenError):
            await service.authenticate(login.access_token)

    @pytest.mark.asyncio
    async def test_logout_unknown_principal(self, service):
        with pytest.raises(TokenEpochConflictError):
            await service.logout("8a6e0804-2bd0-4672-b79d-d97027f9071a")


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_missing_token(self, service):
        with pytest.raises(MissingTokenError):
            await service.authenticate(None)

    @pytest.mark.asyncio
    async def test_valid_token(self, service, db, settings):
        account = create_account(db)
        result = await service.authenticate(create_test_token(settings, account.id))
        assert result.id == account.id

    @pytest.mark.asyncio
    async def test_expired_token(self, service, db, settings):
        """Should raise ExpiredTokenError for expired token."""
        account = create_account(db)
        with pytest.raises(ExpiredTokenError):
            await service.authenticate(create_test_token(settings, account.id, expired=True))

    @pytest.mark.asyncio
    async def test_garbage_token(self, service):
        with pytest.raises(InvalidTokenError):
            await service.authenticate("not-a-jwt")

    @pytest.mark.asyncio
    async def test_wrong_signature(self, service, db, settings):
        account = create_account(db)
        forged = settings.model_copy(update={"jwt_secret": "another-secret-another-secret-0000"})
        with pytest.raises(InvalidTokenError):
            await service.authenticate(create_test_token(forged, account.id))

    @pytest.mark.asyncio
    async def test_missing_epoch_claim(self, service, db, settings):
        account = create_account(db)
        token = jwt.encode(
            {"sub": account.id, "role": "user", "iat": 1, "exp": 4102444800},
            settings.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError, match="malformed"):
            await service.authenticate(token)

    @pytest.mark.asyncio
    async def test_deleted_principal(self, service, settings):
        token = create_test_token(settings, "8a6e0804-2bd0-4672-b79d-d97027f9071a")
        with pytest.raises(UserNotFoundError):
            await service.authenticate(token)

    @pytest.mark.asyncio
    async def test_stale_epoch(self, service, db, settings):
        account = create_account(db)
        with pytest.raises(StaleTokenError):
            await service.authenticate(create_test_token(settings, account.id, token_epoch=5))


class TestGates:
    @pytest.mark.asyncio
    async def test_entitlement_with_active_subscription(self, service, db, settings):
        account = create_account(db, subscription=active_subscription())
        result = await service.require_entitlement(create_test_token(settings, account.id))
        assert result.id == account.id

    @pytest.mark.asyncio
    async def test_entitlement_without_subscription(self, service, db, settings):
        account = create_account(db)
        with pytest.raises(SubscriptionRequiredError) as exc_info:
            await service.require_entitlement(create_test_token(settings, account.id))
        assert exc_info.value.details["redirect_to"] == "/subscription/plans"

    @pytest.mark.asyncio
    async def test_entitlement_with_expired_subscription(self, service, db, settings):
        """Expired subscriptions should lose access without any sweep."""
        account = create_account(db, subscription=expired_subscription())
        with pytest.raises(SubscriptionRequiredError):
            await service.require_entitlement(create_test_token(settings, account.id))

    @pytest.mark.asyncio
    async def test_require_admin(self, service, db, settings):
        account = create_account(db, email="admin@example.com", role=Role.ADMIN)
        result = await service.require_admin(create_test_token(settings, account.id, role=Role.ADMIN))
        assert result.role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_require_admin_rejects_users(self, service, db, settings):
        account = create_account(db)
        with pytest.raises(InsufficientPermissionsError):
            await service.require_admin(create_test_token(settings, account.id))

    @pytest.mark.asyncio
    async def test_role_claim_is_not_trusted(self, service, db, settings):
        """A user token claiming the admin role should still be refused."""
        account = create_account(db)
        token = create_test_token(settings, account.id, role=Role.ADMIN)
        with pytest.raises(InsufficientPermissionsError):
            await service.require_admin(token)


class TestProfile:
    @pytest.mark.asyncio
    async def test_profile_resolves_categories(self, service, db, category_pair):
        parent, sub = category_pair
        account = create_account(
            db,
            parent_category_id=parent.id,
            sub_category_id=sub.id,
            subscription=active_subscription(),
        )

        profile = await service.get_profile(account.id)

        assert profile.parent_category.name == "Engineering"
        assert profile.sub_category.name == "Computer Science"
        assert profile.subscription.is_active is True
        assert profile.subscription.plan == "yearly"

    @pytest.mark.asyncio
    async def test_profile_with_deleted_category(self, service, db):
        account = create_account(db, parent_category_id="8a6e0804-2bd0-4672-b79d-d97027f9071a")
        profile = await service.get_profile(account.id)
        assert profile.parent_category is None
        assert profile.subscription.is_active is False

    @pytest.mark.asyncio
    async def test_profile_unknown_principal(self, service):
        with pytest.raises(UserNotFoundError):
            await service.get_profile("8a6e0804-2bd0-4672-b79d-d97027f9071a")
