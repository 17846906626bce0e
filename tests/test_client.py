"""
Staff client tests: login/session, role gating, form submit, record list screen
"""
import json
from datetime import datetime, timedelta, timezone

import pytest

from recordshop.client.api_client import RecordShopClient
from recordshop.client.inventory import InventoryView, customer_display
from recordshop.client.session import SessionStorage
from recordshop.core.validation import RecordForm
from recordshop.errors import (
    AuthenticationRequired,
    ClientValidationFailure,
    EmptyExportError,
    InvalidCredentials,
    PermissionDenied,
    RecordNotFound,
)
from recordshop.models.record import Record


def _login(shop: RecordShopClient, role: str) -> dict:
    return shop.login(f"{role}@recordshop.com", "password")


class TestLogin:
    def test_login_persists_session(self, shop, storage):
        profile = _login(shop, "admin")
        assert profile["role"] == "admin"
        assert shop.is_logged_in()
        assert shop.assignment_title() == "System Admin"

        saved = storage.load()
        assert saved.user == profile
        assert "password" not in saved.user

    def test_invalid_login_keeps_logged_out(self, shop, storage):
        with pytest.raises(InvalidCredentials) as exc_info:
            shop.login("admin@recordshop.com", "wrong")
        assert exc_info.value.message == "Invalid email or password."
        assert not shop.is_logged_in()
        assert storage.load() is None

    def test_session_survives_restart(self, http, storage):
        _login(RecordShopClient(http=http, storage=storage), "manager")
        restarted = RecordShopClient(http=http, storage=storage)
        assert restarted.role() == "manager"

    def test_logout_clears_session(self, shop, storage):
        _login(shop, "clerk")
        shop.logout()
        assert not shop.is_logged_in()
        assert storage.load() is None

    def test_expired_session_logs_out(self, http, storage):
        now = [datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)]
        shop = RecordShopClient(http=http, storage=storage, max_age=timedelta(hours=8), clock=lambda: now[0])
        _login(shop, "admin")
        now[0] += timedelta(hours=7, minutes=59)
        assert shop.is_logged_in()
        now[0] += timedelta(minutes=1)
        assert not shop.is_logged_in()
        assert storage.load() is None


class TestRoleGating:
    def test_clerk(self, shop):
        _login(shop, "clerk")
        assert shop.can_add()
        assert not shop.can_update()
        assert not shop.can_delete()

    def test_manager(self, shop):
        _login(shop, "manager")
        assert shop.can_update()
        assert not shop.can_delete()

    def test_admin(self, shop):
        _login(shop, "admin")
        assert shop.can_add() and shop.can_update() and shop.can_delete()

    def test_logged_out_gets_nothing(self, shop):
        assert not shop.can_add()
        with pytest.raises(AuthenticationRequired):
            shop.require_login()

    def test_require_role(self, shop):
        _login(shop, "clerk")
        assert shop.require_role("clerk", "manager", "admin")["role"] == "clerk"
        with pytest.raises(PermissionDenied):
            shop.require_role("manager", "admin")


class TestRecordCalls:
    def test_dropdowns(self, shop):
        assert shop.get_formats() == ["Vinyl", "CD"]
        assert "Hip-Hop" in shop.get_genres()

    def test_get_missing_record(self, shop):
        with pytest.raises(RecordNotFound):
            shop.get_record(999)

    def test_submit_new_record(self, shop, record_payload):
        _login(shop, "clerk")
        record = shop.submit_form(RecordForm(record_payload))
        assert record.id == 7
        assert shop.get_record(7).title == "X"

    def test_invalid_form_never_reaches_server(self, shop, record_payload):
        _login(shop, "clerk")
        form = RecordForm({**record_payload, "customerId": "123"})
        with pytest.raises(ClientValidationFailure):
            shop.submit_form(form)
        assert len(shop.list_records()) == 6

    def test_clerk_cannot_submit_edit(self, shop, record_payload):
        _login(shop, "clerk")
        with pytest.raises(PermissionDenied):
            shop.submit_form(RecordForm(record_payload), record_id=1)

    def test_manager_edits_record(self, shop):
        _login(shop, "manager")
        form = RecordForm.from_record(shop.get_record(2))
        form.set_value("stockQty", "20")
        form.set_value("customerId", "77B")
        form.set_value("customerFirstName", "Ann")
        form.set_value("customerLastName", "Lee")
        form.set_value("customerContact", "0871234567")
        form.set_value("customerEmail", "ann@example.com")
        updated = shop.submit_form(form, record_id=2)
        assert updated.stock_qty == 20
        assert updated.title == "Black Summer"


class TestInventoryView:
    def test_load_requires_login(self, shop, tmp_path):
        with pytest.raises(AuthenticationRequired):
            InventoryView(shop, export_dir=tmp_path).load()

    def test_search(self, shop, tmp_path):
        _login(shop, "clerk")
        view = InventoryView(shop, export_dir=tmp_path)
        view.load()
        assert [r.title for r in view.search("radiohead")] == ["The Bends", "OK Computer"]
        assert [r.id for r in view.search("cd")] == [2, 4]
        assert len(view.search("  ")) == 6

    def test_admin_delete_updates_list(self, shop, tmp_path):
        _login(shop, "admin")
        view = InventoryView(shop, export_dir=tmp_path)
        view.load()
        removed = view.delete(3)
        assert removed.title == "Audioslave"
        assert all(r.id != 3 for r in view.records)
        with pytest.raises(RecordNotFound):
            view.delete(3)

    def test_manager_cannot_delete(self, shop, tmp_path):
        _login(shop, "manager")
        view = InventoryView(shop, export_dir=tmp_path)
        view.load()
        with pytest.raises(PermissionDenied):
            view.delete(1)
        assert len(view.records) == 6

    def test_export_empty_list(self, shop, tmp_path):
        view = InventoryView(shop, export_dir=tmp_path)
        with pytest.raises(EmptyExportError) as exc_info:
            view.export_all()
        assert exc_info.value.message == "No records to export"

    def test_export_all_uses_loaded_list(self, shop, tmp_path):
        _login(shop, "admin")
        view = InventoryView(shop, export_dir=tmp_path)
        view.load()
        result = view.export_all()
        assert result.spreadsheet.exists()
        assert result.pdf.exists()
        assert result.spreadsheet.name.startswith("records_")
        assert result.pdf.name.startswith("records_")


def test_customer_display():
    assert customer_display(Record(customer_id="12A", customer_last_name="Lee")) == "Lee (12A)"
    assert customer_display(Record(customer_id="12A")) == "12A"
    assert customer_display(Record()) == "N/A"


def test_session_storage_ignores_garbage(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("[]")
    assert SessionStorage(path).load() is None


def test_session_storage_ignores_naive_timestamp(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({
        "currentUser": {
            "user": {"id": 3, "name": "Alex Admin", "email": "admin@recordshop.com", "role": "admin"},
            "created_at": "2026-01-01T09:00:00",
        }
    }))
    assert SessionStorage(path).load() is None
