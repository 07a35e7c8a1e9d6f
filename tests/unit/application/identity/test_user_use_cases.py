"""Tests for the user lifecycle use cases and their dual-write policy."""

import pytest

from tests.conftest import STRONG_PASSWORD
from tests.fakes import InMemoryRepositoryFactory
from userhub.application.identity.services import UserManagementService, UserProfileService
from userhub.application.identity.use_cases.dtos.user_dtos import CreateUserInput, UpdateUserInput
from userhub.domain.common.exceptions import PersistenceError, ValidationError
from userhub.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError


async def create(
    service: UserManagementService, email: str = "JOHN@Example.com", **kwargs: object
) -> str:
    user = await service.create_user(
        CreateUserInput(
            name="John Doe",
            email=email,
            password=STRONG_PASSWORD,
            **kwargs,  # type: ignore[arg-type]
        )
    )
    return user.id


class TestCreateUser:
    async def test_stores_normalized_email_in_both_stores(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user = await management_service.create_user(
            CreateUserInput(name="John Doe", email="JOHN@Example.com", age=30)
        )

        assert user.email == "john@example.com"
        assert user.role == "USER"
        assert user.age == 30
        document = repositories.document_users.users[user.id]
        relational = repositories.relational_users.users[user.id]
        assert document.email.value == relational.email.value == "john@example.com"
        assert document.password == relational.password

    async def test_generates_temporary_password_when_none_given(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user = await management_service.create_user(
            CreateUserInput(name="Temp", email="temp@example.com")
        )
        assert repositories.document_users.users[user.id].password.hashed_value

    async def test_applies_requested_role(
        self, management_service: UserManagementService
    ) -> None:
        user = await management_service.create_user(
            CreateUserInput(name="Mod", email="mod@example.com", role="moderator")
        )
        assert user.role == "MODERATOR"

    async def test_rejects_invalid_age(self, management_service: UserManagementService) -> None:
        with pytest.raises(ValidationError, match="Invalid age"):
            await management_service.create_user(
                CreateUserInput(name="John Doe", email="john@example.com", age=200)
            )

    async def test_duplicate_email_conflicts(
        self, management_service: UserManagementService
    ) -> None:
        await create(management_service, "john@example.com")
        with pytest.raises(EmailAlreadyExistsError, match="User with this email already exists"):
            await create(management_service, "  John@EXAMPLE.com ")

    async def test_document_failure_skips_relational_write(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        repositories.document_users.fail_on("save", PersistenceError(store="document"))

        with pytest.raises(PersistenceError):
            await create(management_service)

        assert "save" not in repositories.relational_users.calls
        assert repositories.relational_users.users == {}

    async def test_relational_failure_keeps_document_write(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        repositories.relational_users.fail_on("save", PersistenceError(store="relational"))

        with pytest.raises(PersistenceError):
            await create(management_service)

        assert len(repositories.document_users.users) == 1
        assert repositories.relational_users.users == {}

    async def test_reads_never_touch_relational_store(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        await create(management_service)
        assert repositories.relational_users.calls == ["save"]


class TestReadUsers:
    async def test_get_by_id(
        self, management_service: UserManagementService, profile_service: UserProfileService
    ) -> None:
        user_id = await create(management_service)
        user = await profile_service.get_user_profile(user_id)
        assert user.id == user_id
        assert user.name == "John Doe"

    async def test_get_missing_user(self, profile_service: UserProfileService) -> None:
        with pytest.raises(UserNotFoundError):
            await profile_service.get_user_profile("00000000-0000-0000-0000-000000000000")

    async def test_list_is_newest_first(
        self,
        management_service: UserManagementService,
        profile_service: UserProfileService,
        repositories: InMemoryRepositoryFactory,
    ) -> None:
        first = await create(management_service, "first@example.com")
        second = await create(management_service, "second@example.com")
        stored = repositories.document_users.users
        stored[second].created_at = stored[first].created_at.replace(year=2100)

        users = await profile_service.get_all_user_profiles()

        assert [u.id for u in users] == [second, first]


class TestUpdateUser:
    async def test_partial_update_changes_only_given_fields(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user_id = await create(management_service, age=30)

        updated = await management_service.update_user(user_id, UpdateUserInput(name="Johnny"))

        assert updated.name == "Johnny"
        assert updated.age == 30
        assert updated.email == "john@example.com"
        assert repositories.relational_users.users[user_id].name == "Johnny"

    async def test_email_taken_by_another_user(
        self, management_service: UserManagementService
    ) -> None:
        user_a = await create(management_service, "a@example.com")
        await create(management_service, "b@example.com")

        with pytest.raises(EmailAlreadyExistsError, match="Email already taken by another user"):
            await management_service.update_user(user_a, UpdateUserInput(email="B@example.com"))

    async def test_keeping_own_email_is_allowed(
        self, management_service: UserManagementService
    ) -> None:
        user_id = await create(management_service, "a@example.com")
        updated = await management_service.update_user(
            user_id, UpdateUserInput(email="A@Example.com", age=41)
        )
        assert updated.email == "a@example.com"
        assert updated.age == 41

    async def test_missing_user(self, management_service: UserManagementService) -> None:
        with pytest.raises(UserNotFoundError):
            await management_service.update_user("missing", UpdateUserInput(name="x"))

    async def test_invalid_value_is_rejected_before_any_write(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user_id = await create(management_service)
        with pytest.raises(ValidationError):
            await management_service.update_user(user_id, UpdateUserInput(age=151))
        assert "update" not in repositories.document_users.calls

    async def test_updated_at_moves_forward(
        self, management_service: UserManagementService
    ) -> None:
        user_id = await create(management_service)
        updated = await management_service.update_user(user_id, UpdateUserInput(role="ADMIN"))
        assert updated.role == "ADMIN"
        assert updated.updated_at >= updated.created_at


class TestDeleteUser:
    async def test_deletes_from_both_stores(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user_id = await create(management_service)
        await management_service.delete_user(user_id)
        assert repositories.document_users.users == {}
        assert repositories.relational_users.users == {}

    async def test_deleting_missing_user_fails(
        self, management_service: UserManagementService
    ) -> None:
        with pytest.raises(UserNotFoundError):
            await management_service.delete_user("00000000-0000-0000-0000-000000000000")

    async def test_deleting_twice_fails_the_second_time(
        self, management_service: UserManagementService
    ) -> None:
        user_id = await create(management_service)
        await management_service.delete_user(user_id)
        with pytest.raises(UserNotFoundError):
            await management_service.delete_user(user_id)

    async def test_tolerates_row_already_missing_from_mirror(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user_id = await create(management_service)
        del repositories.relational_users.users[user_id]

        await management_service.delete_user(user_id)

        assert repositories.document_users.users == {}

    async def test_relational_failure_propagates(
        self, management_service: UserManagementService, repositories: InMemoryRepositoryFactory
    ) -> None:
        user_id = await create(management_service)
        repositories.relational_users.fail_on("delete", PersistenceError(store="relational"))

        with pytest.raises(PersistenceError):
            await management_service.delete_user(user_id)

        assert repositories.document_users.users == {}
        assert user_id in repositories.relational_users.users
