"""Tests for crumbjar.store module."""

import threading

from crumbjar.models import Cookie
from crumbjar.store import CookieStore


class TestCookieStore:
    """Tests for CookieStore."""

    def test_empty_store(self):
        """Test a new store holds nothing."""
        store = CookieStore("example.com")
        assert len(store) == 0
        assert store.snapshot() == ()

    def test_upsert_inserts(self):
        """Test upsert adds a new cookie."""
        store = CookieStore("example.com")
        assert store.upsert(Cookie("a", "1")) is None
        assert store.get("a") == Cookie("a", "1")

    def test_upsert_replaces_same_name(self):
        """Test a second upsert replaces rather than duplicates."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1", path="/old"))
        previous = store.upsert(Cookie("a", "2", path="/new"))

        assert previous == Cookie("a", "1", path="/old")
        assert store.snapshot() == (Cookie("a", "2", path="/new"),)

    def test_upsert_replaces_case_insensitively(self):
        """Test names differing only in case are the same cookie."""
        store = CookieStore("example.com")
        store.upsert(Cookie("Session", "1"))
        store.upsert(Cookie("SESSION", "2"))

        assert len(store) == 1
        assert store.get("session").name == "SESSION"
        assert store.get("session").value == "2"

    def test_remove(self):
        """Test remove deletes by case-insensitive name."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1"))
        assert store.remove("A") == Cookie("a", "1")
        assert "a" not in store

    def test_remove_missing_is_noop(self):
        """Test removing an unknown cookie does nothing."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1"))
        assert store.remove("b") is None
        assert len(store) == 1

    def test_contains(self):
        """Test membership is by name, ignoring case."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1"))
        assert "A" in store
        assert 42 not in store

    def test_snapshot_is_detached(self):
        """Test a snapshot does not change when the store does."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1"))
        snapshot = store.snapshot()
        store.upsert(Cookie("b", "2"))
        store.remove("a")

        assert snapshot == (Cookie("a", "1"),)

    def test_matching_filters_by_path(self):
        """Test matching returns only path-matching cookies."""
        store = CookieStore("example.com")
        store.upsert(Cookie("root", "1", path="/"))
        store.upsert(Cookie("app", "2", path="/app"))
        store.upsert(Cookie("nopath", "3"))

        assert [c.name for c in store.matching("/app/page")] == ["root", "app"]
        assert [c.name for c in store.matching("/other")] == ["root"]
        assert [c.name for c in store.matching(None)] == ["nopath"]

    def test_matching_order_is_stable(self):
        """Test matching keeps insertion order; an update moves to the end."""
        store = CookieStore("example.com")
        for name in ("a", "b", "c"):
            store.upsert(Cookie(name, "1", path="/"))
        store.upsert(Cookie("a", "2", path="/"))

        assert [c.name for c in store.matching("/")] == ["b", "c", "a"]
        assert [c.name for c in store.matching("/")] == ["b", "c", "a"]

    def test_clear(self):
        """Test clear empties the store."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1"))
        store.clear()
        assert len(store) == 0

    def test_concurrent_upserts(self):
        """Test concurrent upserts of distinct names are all kept."""
        store = CookieStore("example.com")
        barrier = threading.Barrier(16)

        def worker(i):
            barrier.wait()
            for j in range(50):
                store.upsert(Cookie(f"c{i}-{j}", str(j)))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 16 * 50

    def test_repr(self):
        """Test CookieStore repr."""
        store = CookieStore("example.com")
        store.upsert(Cookie("a", "1"))
        assert repr(store) == "<CookieStore example.com ['a']>"
