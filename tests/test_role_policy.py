"""
Unit tests for the staff directory and role policy
"""
import pytest

from recordshop.core import role_policy
from recordshop.core.auth_directory import AuthDirectory


class TestAuthDirectory:
    @pytest.mark.parametrize(
        "email,role",
        [
            ("clerk@recordshop.com", "clerk"),
            ("manager@recordshop.com", "manager"),
            ("admin@recordshop.com", "admin"),
        ],
    )
    def test_valid_credentials(self, email, role):
        user = AuthDirectory().find_by_credentials(email, "password")
        assert user is not None
        assert user.role == role
        assert "password" not in user.public_profile()

    @pytest.mark.parametrize(
        "email,password",
        [
            ("clerk@recordshop.com", "wrong"),
            ("nobody@recordshop.com", "password"),
            ("", ""),
            ("CLERK@recordshop.com", "password"),
        ],
    )
    def test_invalid_credentials(self, email, password):
        assert AuthDirectory().find_by_credentials(email, password) is None

    def test_get_by_id(self):
        directory = AuthDirectory()
        assert directory.get(3).name == "Alex Admin"
        assert directory.get(99) is None


class TestRolePolicy:
    def test_clerk(self):
        assert role_policy.can_add("clerk")
        assert not role_policy.can_update("clerk")
        assert not role_policy.can_delete("clerk")

    def test_manager(self):
        assert role_policy.can_add("manager")
        assert role_policy.can_update("manager")
        assert not role_policy.can_delete("manager")

    def test_admin(self):
        assert role_policy.can_add("admin")
        assert role_policy.can_update("admin")
        assert role_policy.can_delete("admin")

    @pytest.mark.parametrize("role", ["guest", "", None, "Admin"])
    def test_unknown_role_gets_nothing(self, role):
        assert role_policy.permissions_for(role) == frozenset()

    def test_unknown_action_denied(self):
        assert not role_policy.is_allowed("admin", "publish")

    def test_permission_tiers_are_nested(self):
        clerk = role_policy.permissions_for("clerk")
        manager = role_policy.permissions_for("manager")
        admin = role_policy.permissions_for("admin")
        assert clerk < manager < admin

    def test_assignment_title(self):
        assert role_policy.assignment_title("clerk") == "Salesperson"
        assert role_policy.assignment_title("manager") == "Store Manager"
        assert role_policy.assignment_title("admin") == "System Admin"
        assert role_policy.assignment_title(None) == "Unknown"
