"""Login and role helper unit tests."""

from core import simple_auth
from core.constants import MENU_REPORTS, STOCK_LOW
from core.simple_auth import (
    build_user_context,
    can_view_reports,
    hash_password,
    verify_login,
)
from core.store import USERS
from ui.components import money, status_label
from ui.sidebar import menu_for


class TestVerifyLogin:

    def test_hash_is_sha256_hex(self):
        digest = hash_password("manager123")
        assert len(digest) == 64
        assert digest == hash_password("manager123")

    def test_builtin_manager(self, monkeypatch):
        monkeypatch.setattr(simple_auth, "get_bootstrap_users", lambda: {})
        assert verify_login(USERS, "Manager", "manager123") == (
            True, "Grace Namutebi", "manager"
        )

    def test_builtin_attendant(self, monkeypatch):
        monkeypatch.setattr(simple_auth, "get_bootstrap_users", lambda: {})
        assert verify_login(USERS, "mary", "attendant123") == (
            True, "Mary Wanjiru", "attendant"
        )

    def test_wrong_password(self, monkeypatch):
        monkeypatch.setattr(simple_auth, "get_bootstrap_users", lambda: {})
        assert verify_login(USERS, "mary", "nope") == (False, None, None)

    def test_unknown_user(self, monkeypatch):
        monkeypatch.setattr(simple_auth, "get_bootstrap_users", lambda: {})
        assert verify_login(USERS, "ghost", "x") == (False, None, None)

    def test_secrets_user_takes_precedence(self, monkeypatch):
        configured = {
            "mary": {
                "name": "Mary W.",
                "role": "manager",
                "password_hash": hash_password("s3cret"),
            }
        }
        monkeypatch.setattr(simple_auth, "get_bootstrap_users", lambda: configured)
        assert verify_login(USERS, "mary", "s3cret") == (True, "Mary W.", "manager")
        assert verify_login(USERS, "mary", "attendant123") == (False, None, None)


class TestRoles:

    def test_manager_sees_reports(self):
        manager = build_user_context("manager", "Grace Namutebi", "manager")
        assert manager["is_manager"] is True
        assert can_view_reports(manager)
        assert MENU_REPORTS in menu_for(manager)

    def test_attendant_does_not_see_reports(self):
        attendant = build_user_context("mary", "Mary Wanjiru", "attendant")
        assert not can_view_reports(attendant)
        assert MENU_REPORTS not in menu_for(attendant)

    def test_no_user(self):
        assert not can_view_reports(None)


class TestFormatting:

    def test_money_defaults_to_ugx(self):
        assert money(1234567) == "UGX 1,234,567"
        assert money(None) == "N/A"

    def test_status_label(self):
        assert status_label(STOCK_LOW).endswith("Low Stock")
        assert status_label("completed") == "Completed"
