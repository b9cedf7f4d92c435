"""Tests for PageManager and CounterManager."""

from psycopg.types.json import Jsonb

from contentstore.db.counters import CounterManager
from contentstore.db.pages import PageManager


class TestPages:
    def test_upsert_is_single_statement(self, conn):
        conn.results = [{"page_id": "about"}]

        page_id = PageManager().upsert_page(conn, "about", {"title": "About"})

        assert page_id == "about"
        assert len(conn.executed) == 1
        sql, params = conn.executed[0]
        assert "ON CONFLICT (page_id) DO UPDATE" in sql
        assert params[0] == "about"
        assert isinstance(params[1], Jsonb)
        assert params[1].obj == {"title": "About"}
        assert conn.commits == 1

    def test_get_page_returns_payload(self, conn):
        conn.results = [{"data": {"blocks": [1, 2]}}]
        assert PageManager().get_page(conn, "about") == {"blocks": [1, 2]}

    def test_get_missing_page(self, conn):
        conn.results = [None]
        assert PageManager().get_page(conn, "missing") is None


class TestCounters:
    def test_first_call_starts_at_one(self, conn):
        conn.results = [{"count": 1}]

        assert CounterManager().increment(conn, "visits") == 1
        sql, params = conn.executed[0]
        assert "VALUES (%s, 1)" in sql
        assert "count = counters.count + 1" in sql
        assert params == ("visits",)

    def test_sequence(self, conn):
        conn.results = [{"count": 1}, {"count": 2}]
        manager = CounterManager()
        assert [manager.increment(conn, "x"), manager.increment(conn, "x")] == [1, 2]
