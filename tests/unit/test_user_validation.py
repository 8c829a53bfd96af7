"""
Unit tests for user input validation
"""

import pytest
from userhub.models.user import UserRole
from userhub.schemas.user import validate_user_id, validate_user_update


def _messages(result):
    return [err["message"] for err in result.errors]


class TestUserIdValidation:
    """Test route parameter parsing"""

    def test_numeric_id_is_converted(self):
        result = validate_user_id({"id": "42"})

        assert result.success is True
        assert result.data == {"id": 42}
        assert result.errors == []

    def test_leading_zeros_are_accepted(self):
        result = validate_user_id({"id": "007"})

        assert result.success is True
        assert result.data["id"] == 7

    @pytest.mark.parametrize("value", ["abc", "12a", "1.5", "", " 1", "+3"])
    def test_non_numeric_id_fails(self, value):
        result = validate_user_id({"id": value})

        assert result.success is False
        assert result.data is None
        assert result.errors == [{"field": "id", "message": "User ID must be a valid number"}]

    def test_negative_id_fails_pattern(self):
        """'-1' never reaches the positivity check"""
        result = validate_user_id({"id": "-1"})

        assert result.success is False
        assert "User ID must be a valid number" in _messages(result)

    def test_zero_id_fails(self):
        result = validate_user_id({"id": "0"})

        assert result.success is False
        assert _messages(result) == ["User ID must be a positive number"]

    def test_missing_id_fails(self):
        result = validate_user_id({})

        assert result.success is False
        assert result.errors[0]["field"] == "id"


class TestUserUpdateValidation:
    """Test update payload parsing"""

    def test_empty_payload_fails(self):
        result = validate_user_update({})

        assert result.success is False
        assert _messages(result) == ["At least one field must be provided for update"]

    def test_unknown_keys_only_fails(self):
        result = validate_user_update({"nickname": "bob"})

        assert result.success is False
        assert "At least one field must be provided for update" in _messages(result)

    def test_unknown_keys_are_dropped(self):
        result = validate_user_update({"name": "Bob", "is_active": False})

        assert result.success is True
        assert result.data == {"name": "Bob"}

    def test_non_object_payload_fails(self):
        result = validate_user_update(["name", "Bob"])

        assert result.success is False
        assert result.errors

    def test_missing_payload_fails(self):
        assert validate_user_update(None).success is False

    def test_name_is_trimmed(self):
        result = validate_user_update({"name": "  Ada Lovelace  "})

        assert result.data == {"name": "Ada Lovelace"}

    def test_blank_name_fails(self):
        result = validate_user_update({"name": "   "})

        assert result.success is False
        assert result.errors == [{"field": "name", "message": "Name cannot be empty"}]

    def test_long_name_fails(self):
        result = validate_user_update({"name": "x" * 256})

        assert _messages(result) == ["Name cannot exceed 255 characters"]

    def test_email_is_lowercased_and_trimmed(self):
        result = validate_user_update({"email": "  Ada@Userhub.IO "})

        assert result.success is True
        assert result.data == {"email": "ada@userhub.io"}

    @pytest.mark.parametrize("value", ["not-an-email", "ada@", "@userhub.io", "ada example@x.com"])
    def test_invalid_email_fails(self, value):
        result = validate_user_update({"email": value})

        assert result.success is False
        assert result.errors == [{"field": "email", "message": "Invalid email format"}]

    def test_long_email_fails(self):
        email = "a" * 60 + "@" + ".".join(["b" * 60] * 4) + ".com"
        result = validate_user_update({"email": email})

        assert result.success is False
        assert result.errors == [{"field": "email", "message": "Email cannot exceed 255 characters"}]

    def test_email_length_is_checked_after_trimming(self):
        email = "a" * 64 + "@" + ".".join(["b" * 60] * 3) + ".io"
        result = validate_user_update({"email": f"  {email}  "})

        assert len(email) < 255
        assert result.success is True
        assert result.data == {"email": email}

    def test_short_password_fails(self):
        result = validate_user_update({"password": "12345"})

        assert _messages(result) == ["Password must be at least 6 characters"]

    def test_long_password_fails(self):
        result = validate_user_update({"password": "p" * 129})

        assert _messages(result) == ["Password cannot exceed 128 characters"]

    def test_password_bounds_are_inclusive(self):
        assert validate_user_update({"password": "p" * 6}).success is True
        assert validate_user_update({"password": "p" * 128}).success is True

    @pytest.mark.parametrize("role", ["user", "admin"])
    def test_valid_roles(self, role):
        result = validate_user_update({"role": role})

        assert result.success is True
        assert result.data["role"] == UserRole(role)

    @pytest.mark.parametrize("role", ["superuser", "ADMIN", "", 1])
    def test_invalid_role_fails(self, role):
        result = validate_user_update({"role": role})

        assert result.success is False
        assert _messages(result) == ['Role must be either "user" or "admin"']

    def test_explicit_null_is_rejected(self):
        result = validate_user_update({"name": None})

        assert result.success is False
        assert result.errors[0]["field"] == "name"

    def test_errors_are_reported_per_field(self):
        result = validate_user_update({"name": "", "password": "123", "role": "root"})

        assert result.success is False
        fields = {err["field"] for err in result.errors}
        assert fields == {"name", "password", "role"}

    def test_full_payload(self):
        result = validate_user_update({
            "name": "Grace",
            "email": "grace@userhub.io",
            "password": "hopper123",
            "role": "admin",
        })

        assert result.success is True
        assert result.data == {
            "name": "Grace",
            "email": "grace@userhub.io",
            "password": "hopper123",
            "role": UserRole.ADMIN,
        }
