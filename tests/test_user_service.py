# =============================================================================
# tests/test_user_service.py - UserService Tests
# =============================================================================
# Tests for core/services/user_service.py using fake stores.
# =============================================================================

import pytest

from app.exceptions import QueryError
from core.services import UserService
from tests.conftest import FakeUserStore


class TestListNames:
    """Tests for UserService.list_names()."""

    def test_returns_store_names(self):
        store = FakeUserStore(["Ada", "Grace"])
        assert UserService.list_names(store) == ["Ada", "Grace"]
        assert store.calls == 1

    def test_empty_store(self):
        assert UserService.list_names(FakeUserStore([])) == []

    def test_none_from_store_becomes_empty_list(self):
        store = FakeUserStore()
        store.fetch_names = lambda: None
        assert UserService.list_names(store) == []

    def test_query_error_propagates(self, failing_query_store):
        with pytest.raises(QueryError) as exc_info:
            UserService.list_names(failing_query_store)
        assert "1146" in exc_info.value.message

    def test_query_error_logged(self, failing_query_store, caplog):
        with pytest.raises(QueryError):
            UserService.list_names(failing_query_store)
        assert "Failed to list users" in caplog.text

    def test_real_store(self, user_store, sample_names):
        assert UserService.list_names(user_store) == sample_names
