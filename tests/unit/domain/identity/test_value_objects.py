"""Tests for identity value objects."""

import threading

import pytest

from userhub.domain.common.exceptions import ValidationError
from userhub.domain.identity.value_objects import password as password_module
from userhub.domain.identity.value_objects.email import Email
from userhub.domain.identity.value_objects.password import Password, dummy_password
from userhub.domain.identity.value_objects.role import Role, UserRole, role_rank


class TestEmail:
    def test_normalizes_case_and_whitespace(self) -> None:
        assert Email("  JOHN@Example.com ").value == "john@example.com"

    def test_equality_uses_normalized_form(self) -> None:
        assert Email("John@Example.com") == Email("john@example.com")

    @pytest.mark.parametrize(
        "value", ["", "plainaddress", "missing@tld", "@example.com", "two words@example.com"]
    )
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValidationError, match="Invalid email format"):
            Email(value)

    def test_rejects_overlong(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            Email("a" * 250 + "@example.com")


class TestPasswordStrength:
    @pytest.mark.parametrize(
        ("candidate", "message"),
        [
            ("Sh0rt!", "at least 8 characters"),
            ("Aa1!" + "a" * 125, "cannot exceed 128 characters"),
            ("lower1!case", "uppercase letter"),
            ("UPPER1!CASE", "lowercase letter"),
            ("NoDigits!!", "one number"),
            ("NoSymbol12", "special character"),
        ],
    )
    def test_rejects_weak_passwords(self, candidate: str, message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            Password.validate_strength(candidate)

    def test_accepts_strong_password(self) -> None:
        Password.validate_strength("Str0ng!Pass")


class TestPasswordHashing:
    async def test_compare_matches_original(self) -> None:
        password = await Password.create("Str0ng!Pass")
        assert await password.compare("Str0ng!Pass")

    async def test_compare_rejects_other_password(self) -> None:
        password = await Password.create("Str0ng!Pass")
        assert not await password.compare("Str0ng!PasS")

    async def test_hash_is_not_plain_text(self) -> None:
        password = await Password.create("Str0ng!Pass")
        assert "Str0ng!Pass" not in password.hashed_value
        assert "Str0ng!Pass" not in repr(password)

    async def test_create_validates_before_hashing(self) -> None:
        with pytest.raises(ValidationError):
            await Password.create("weak")

    def test_from_hash_rejects_empty(self) -> None:
        with pytest.raises(ValidationError, match="Hashed password cannot be empty"):
            Password.from_hash("")

    async def test_compare_against_unknown_hash_format_is_false(self) -> None:
        password = Password.from_hash("not-a-real-hash")
        assert not await password.compare("Str0ng!Pass")

    async def test_dummy_password_is_hashed_once_off_the_event_loop(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(password_module, "_dummy_password", None)
        hashing_threads: list[threading.Thread] = []
        original_hash = password_module.password_hash.hash

        def recording_hash(plain_password: str) -> str:
            hashing_threads.append(threading.current_thread())
            return original_hash(plain_password)

        monkeypatch.setattr(password_module.password_hash, "hash", recording_hash)

        first = await dummy_password()
        second = await dummy_password()

        assert first is second
        assert len(hashing_threads) == 1
        assert hashing_threads[0] is not threading.main_thread()
        assert not await first.compare("Str0ng!Pass")


class TestRole:
    def test_parses_case_insensitively(self) -> None:
        assert Role.create("admin").value is UserRole.ADMIN
        assert Role.create(" Moderator ").value is UserRole.MODERATOR

    def test_rejects_unknown_role_listing_allowed_values(self) -> None:
        with pytest.raises(ValidationError, match="Invalid role: owner. Allowed roles: USER"):
            Role.create("owner")

    def test_default_is_user(self) -> None:
        assert Role.default().is_user()

    def test_ranks(self) -> None:
        assert role_rank(UserRole.USER) < role_rank(UserRole.MODERATOR) < role_rank(UserRole.ADMIN)

    @pytest.mark.parametrize(
        ("role", "required", "allowed"),
        [
            ("ADMIN", UserRole.USER, True),
            ("ADMIN", UserRole.ADMIN, True),
            ("MODERATOR", UserRole.USER, True),
            ("MODERATOR", UserRole.ADMIN, False),
            ("USER", UserRole.MODERATOR, False),
            ("USER", UserRole.USER, True),
        ],
    )
    def test_has_permission(self, role: str, required: UserRole, allowed: bool) -> None:
        assert Role.create(role).has_permission(required) is allowed

    def test_has_permission_accepts_role_objects(self) -> None:
        assert Role.create("ADMIN").has_permission(Role.create("MODERATOR"))
