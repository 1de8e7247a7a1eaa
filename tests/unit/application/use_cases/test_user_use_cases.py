"""
Unit tests for user use cases.
"""

import pytest
from projecthub.application.dto.user_dto import (
    RegisterUserRequestDTO,
    CreateUserRequestDTO,
    LoginRequestDTO,
    ForgotPasswordRequestDTO,
    UpdateUserRequestDTO,
)
from projecthub.application.use_cases.user_use_cases import (
    RegisterUserUseCase,
    CreateUserUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ListUsersUseCase,
    SearchUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    UpdateUserCommand,
    DeleteUserUseCase,
)
from projecthub.domain.models.base import (
    AuthenticationError,
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from projecthub.domain.models.value_objects import new_id


class TestRegisterUser:
    """Test cases for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, user_repository, auth_service):
        request = RegisterUserRequestDTO(username="alice", email="alice@mail.com", password="pw")

        user = await RegisterUserUseCase(user_repository, auth_service).execute(request)

        stored = await user_repository.find_by_id(user.id)
        assert stored.username == "alice"
        assert stored.password_hash == "hashed:pw"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,email", [
        ("alice", "other@mail.com"),
        ("other", "alice@mail.com"),
    ])
    async def test_register_conflict(self, user_repository, auth_service, make_user, username, email):
        await make_user("alice", "alice@mail.com")
        request = RegisterUserRequestDTO(username=username, email=email, password="pw")

        with pytest.raises(DuplicateEntityError):
            await RegisterUserUseCase(user_repository, auth_service).execute(request)

        assert len(user_repository.data) == 1


class TestCreateUser:
    """Test cases for CreateUserUseCase."""

    @pytest.mark.asyncio
    async def test_reports_clashing_field(self, user_repository, auth_service, make_user):
        await make_user("alice", "alice@mail.com")
        use_case = CreateUserUseCase(user_repository, auth_service)

        with pytest.raises(DuplicateEntityError) as email_clash:
            await use_case.execute(CreateUserRequestDTO(username="bob", email="alice@mail.com", password="pw"))
        with pytest.raises(DuplicateEntityError) as username_clash:
            await use_case.execute(CreateUserRequestDTO(username="alice", email="bob@mail.com", password="pw"))

        assert email_clash.value.field == "email"
        assert username_clash.value.field == "username"

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, user_repository, auth_service):
        user = await CreateUserUseCase(user_repository, auth_service).execute(
            CreateUserRequestDTO(username="bob", email="bob@mail.com", password="pw")
        )

        assert user.password_hash == "hashed:pw"


class TestLogin:
    """Test cases for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_success(self, user_repository, auth_service, make_user):
        user = await make_user("alice", password="pw")

        result = await LoginUseCase(user_repository, auth_service).execute(
            LoginRequestDTO(email="alice@mail.com", password="pw")
        )

        assert result.token == f"token:{user.id}"
        assert result.token_type == "bearer"
        assert result.expires_in == 3600

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, user_repository, auth_service, make_user):
        await make_user("alice", password="pw")
        use_case = LoginUseCase(user_repository, auth_service)

        with pytest.raises(AuthenticationError) as wrong_password:
            await use_case.execute(LoginRequestDTO(email="alice@mail.com", password="nope"))
        with pytest.raises(AuthenticationError) as unknown_email:
            await use_case.execute(LoginRequestDTO(email="ghost@mail.com", password="pw"))

        assert wrong_password.value.message == unknown_email.value.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_missing_secret(self, user_repository, unconfigured_auth_service, make_user):
        await make_user("alice", password="pw")

        with pytest.raises(ConfigurationError):
            await LoginUseCase(user_repository, unconfigured_auth_service).execute(
                LoginRequestDTO(email="alice@mail.com", password="pw")
            )


class TestForgotPassword:
    """Test cases for ForgotPasswordUseCase."""

    @pytest.mark.asyncio
    async def test_reset_replaces_hash(self, user_repository, auth_service, make_user):
        user = await make_user("alice", password="old")

        new_password = await ForgotPasswordUseCase(user_repository, auth_service).execute(
            ForgotPasswordRequestDTO(email="alice@mail.com")
        )

        stored = await user_repository.find_by_id(user.id)
        assert new_password == "Reset123"
        assert stored.password_hash == "hashed:Reset123"

    @pytest.mark.asyncio
    async def test_unknown_email(self, user_repository, auth_service):
        with pytest.raises(EntityNotFoundError):
            await ForgotPasswordUseCase(user_repository, auth_service).execute(
                ForgotPasswordRequestDTO(email="ghost@mail.com")
            )


class TestUserAdministration:
    """Test cases for listing, searching, reading, updating and deleting users."""

    @pytest.mark.asyncio
    async def test_list_users(self, user_repository, make_user):
        await make_user("alice")
        await make_user("bob")

        users = await ListUsersUseCase(user_repository).execute()

        assert {user.username for user in users} == {"alice", "bob"}

    @pytest.mark.asyncio
    async def test_search_users(self, user_repository, make_user):
        await make_user("alice", "alice@work.com")
        await make_user("bob", "bob@home.com")

        users = await SearchUsersUseCase(user_repository).execute("WORK")

        assert [user.username for user in users] == ["alice"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", [None, ""])
    async def test_search_requires_term(self, user_repository, term):
        with pytest.raises(ValidationError):
            await SearchUsersUseCase(user_repository).execute(term)

    @pytest.mark.asyncio
    async def test_get_user(self, user_repository, make_user):
        user = await make_user("alice")

        found = await GetUserUseCase(user_repository).execute(user.id)

        assert found.username == "alice"

    @pytest.mark.asyncio
    async def test_get_user_malformed_and_unknown(self, user_repository):
        with pytest.raises(ValidationError):
            await GetUserUseCase(user_repository).execute("123")
        with pytest.raises(EntityNotFoundError):
            await GetUserUseCase(user_repository).execute(new_id())

    @pytest.mark.asyncio
    async def test_update_user(self, user_repository, make_user):
        user = await make_user("alice")

        updated = await UpdateUserUseCase(user_repository).execute(
            UpdateUserCommand(user_id=user.id, data=UpdateUserRequestDTO(username="alicia"))
        )

        assert updated.username == "alicia"
        assert str(updated.email) == "alice@mail.com"

    @pytest.mark.asyncio
    async def test_update_user_conflicts(self, user_repository, make_user):
        alice = await make_user("alice")
        await make_user("bob")
        use_case = UpdateUserUseCase(user_repository)

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(UpdateUserCommand(alice.id, UpdateUserRequestDTO(username="bob")))
        with pytest.raises(DuplicateEntityError):
            await use_case.execute(UpdateUserCommand(alice.id, UpdateUserRequestDTO(email="bob@mail.com")))

    @pytest.mark.asyncio
    async def test_update_keeping_own_values(self, user_repository, make_user):
        alice = await make_user("alice")

        updated = await UpdateUserUseCase(user_repository).execute(
            UpdateUserCommand(alice.id, UpdateUserRequestDTO(username="alice", email="alice@mail.com"))
        )

        assert updated.username == "alice"

    @pytest.mark.asyncio
    async def test_delete_user(self, user_repository, make_user):
        user = await make_user("alice")

        await DeleteUserUseCase(user_repository).execute(user.id)

        assert await user_repository.find_by_id(user.id) is None
        with pytest.raises(EntityNotFoundError):
            await DeleteUserUseCase(user_repository).execute(user.id)

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, user_repository):
        with pytest.raises(EntityNotFoundError):
            await DeleteUserUseCase(user_repository).execute("not-an-id")
