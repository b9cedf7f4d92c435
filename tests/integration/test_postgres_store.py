"""End-to-end tests against a real PostgreSQL database.

Set CONTENTSTORE_TEST_DSN (e.g. postgresql://user:pw@localhost/contentstore_test)
to run them; every table is truncated before each test.
"""

import os
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

psycopg = pytest.importorskip("psycopg")
from psycopg.rows import dict_row

from contentstore.config import ShortcutConfig
from contentstore.db.init import create_schema
from contentstore.models import ADMIN, BytesUpload
from contentstore.store import ContentStore

DSN = os.environ.get("CONTENTSTORE_TEST_DSN")
PASSWORD = "integration-secret"

pytestmark = pytest.mark.skipif(not DSN, reason="CONTENTSTORE_TEST_DSN not set")


def _connect():
    return psycopg.connect(DSN, row_factory=dict_row)


@pytest.fixture()
def pg_conn():
    conn = _connect()
    create_schema(conn)
    with conn.cursor() as cur:
        cur.execute("TRUNCATE articles, pages, counters, sessions, assets")
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture()
def pg_store(pg_conn):
    return ContentStore(
        pg_conn,
        admin_password=PASSWORD,
        shortcuts=[ShortcutConfig(name="Foo Shortcut", url="/foo")],
    )


def _set_published(conn, slug, published_at):
    with conn.cursor() as cur:
        cur.execute("UPDATE articles SET published_at = %s WHERE slug = %s", (published_at, slug))
    conn.commit()


class TestArticles:
    def test_duplicate_titles_get_distinct_slugs(self, pg_store):
        first = pg_store.create_article("Same Title", "a", "a", ADMIN)
        second = pg_store.create_article("Same Title", "b", "b", ADMIN)

        assert first.slug == "same-title"
        assert second.slug.startswith("same-title-")
        assert pg_store.get_article_by_slug(first.slug).content == "a"
        assert pg_store.get_article_by_slug(second.slug).content == "b"

    def test_unpublished_only_visible_to_admin(self, pg_store, pg_conn):
        pg_store.create_article("Visible", "", "", ADMIN)
        draft = pg_store.create_article("Draft", "", "", ADMIN)
        _set_published(pg_conn, draft.slug, None)

        public = [a.slug for a in pg_store.get_articles(None)]
        admin = [a.slug for a in pg_store.get_articles(ADMIN)]

        assert draft.slug not in public
        assert draft.slug in admin

    def test_update_keeps_publication(self, pg_store):
        created = pg_store.create_article("Original", "c", "t", ADMIN)
        before = pg_store.get_article_by_slug(created.slug)

        stamp = pg_store.update_article(created.slug, "Changed", "c2", "t2", ADMIN)
        after = pg_store.get_article_by_slug(created.slug)

        assert stamp.updated_at is not None
        assert after.title == "Changed"
        assert after.slug == created.slug
        assert after.published_at == before.published_at

    def test_delete(self, pg_store):
        created = pg_store.create_article("Doomed", "", "", ADMIN)
        assert pg_store.delete_article(created.slug, ADMIN) is True
        assert pg_store.delete_article(created.slug, ADMIN) is False
        assert pg_store.get_article_by_slug(created.slug) is None

    def test_next_article_wraps_to_latest(self, pg_store, pg_conn):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for day, title in enumerate(["P1", "P2", "P3"]):
            created = pg_store.create_article(title, "", "", ADMIN)
            _set_published(pg_conn, created.slug, base + timedelta(days=day))

        assert pg_store.get_next_article("p3").slug == "p2"
        assert pg_store.get_next_article("p2").slug == "p1"
        assert pg_store.get_next_article("p1").slug == "p3"

    def test_search(self, pg_store, pg_conn):
        pg_store.create_article("All about FOO", "", "", ADMIN)
        draft = pg_store.create_article("Foo draft", "", "", ADMIN)
        _set_published(pg_conn, draft.slug, None)

        public = [(r.name, r.url) for r in pg_store.search("foo", None)]
        admin = [r.name for r in pg_store.search("foo", ADMIN)]

        assert public == [("All about FOO", "/blog/all-about-foo"), ("Foo Shortcut", "/foo")]
        assert "Foo draft" in admin


class TestSessions:
    def test_login_logout(self, pg_store):
        session = pg_store.authenticate(PASSWORD, 30)

        assert pg_store.get_current_user(session.session_id) == ADMIN
        assert pg_store.destroy_session(session.session_id) is True
        assert pg_store.get_current_user(session.session_id) is None

    def test_expired_session_is_invalid(self, pg_store, pg_conn):
        session = pg_store.authenticate(PASSWORD, 30)
        with pg_conn.cursor() as cur:
            cur.execute(
                "UPDATE sessions SET expires = %s WHERE session_id = %s",
                (datetime.now(timezone.utc) - timedelta(seconds=1), session.session_id),
            )
        pg_conn.commit()

        assert pg_store.get_current_user(session.session_id) is None

    def test_login_purges_expired(self, pg_store, pg_conn):
        stale = pg_store.authenticate(PASSWORD, 0)
        pg_store.authenticate(PASSWORD, 30)

        with pg_conn.cursor() as cur:
            cur.execute("SELECT session_id FROM sessions")
            remaining = [row["session_id"] for row in cur.fetchall()]

        assert stale.session_id not in remaining
        assert len(remaining) == 1


class TestPagesCountersAssets:
    def test_page_upsert(self, pg_store):
        assert pg_store.get_page("about") is None
        pg_store.create_or_update_page("about", {"v": 1}, ADMIN)
        pg_store.create_or_update_page("about", {"v": 2, "tags": ["a"]}, ADMIN)
        assert pg_store.get_page("about") == {"v": 2, "tags": ["a"]}

    def test_counter_sequence(self, pg_store):
        assert pg_store.create_or_update_counter("x") == 1
        assert pg_store.create_or_update_counter("x") == 2

    def test_concurrent_counter(self, pg_conn):
        calls = 8

        def bump(_):
            with _connect() as conn:
                return ContentStore(conn, admin_password=PASSWORD).create_or_update_counter("hits")

        with ThreadPoolExecutor(max_workers=4) as pool:
            counts = sorted(pool.map(bump, range(calls)))

        assert counts == list(range(1, calls + 1))

    def test_asset_round_trip(self, pg_store):
        payload = bytes(range(256)) * 4
        pg_store.store_asset("a/b.png", BytesUpload(data=payload, content_type="image/png"))

        asset = pg_store.get_asset("a/b.png")

        assert asset.filename == "b.png"
        assert asset.size == len(payload)
        assert asset.mime_type == "image/png"
        assert asset.data.data == payload

    def test_asset_overwrite(self, pg_store):
        pg_store.store_asset("logo", BytesUpload(data=b"old", content_type="text/plain"))
        pg_store.store_asset("logo", BytesUpload(data=b"newer", content_type="image/svg+xml"))

        asset = pg_store.get_asset("logo")

        assert (asset.data.data, asset.size, asset.mime_type) == (b"newer", 5, "image/svg+xml")
