"""Tests for the source loading helpers in jumptree.widgets.source_view."""

import os

from jumptree.widgets.source_view import FileCache, invalidate_file_cache, load_source


class TestFileCache:
    def test_miss(self, tmp_path):
        assert FileCache().get(tmp_path / "a.py") is None

    def test_hit(self, tmp_path):
        path = tmp_path / "a.py"
        path.write_text("x = 1\n")
        cache = FileCache()
        cache.put(path, path.stat().st_mtime, "cached")
        assert cache.get(path) == "cached"

    def test_stale_entry_dropped(self, tmp_path):
        path = tmp_path / "a.py"
        path.write_text("x = 1\n")
        cache = FileCache()
        cache.put(path, path.stat().st_mtime - 10, "old")
        assert cache.get(path) is None

    def test_evicts_least_recently_used(self, tmp_path):
        cache = FileCache(max_size=2)
        paths = []
        for name in ["a.py", "b.py", "c.py"]:
            path = tmp_path / name
            path.write_text(name)
            paths.append(path)
        a, b, c = paths
        cache.put(a, a.stat().st_mtime, "a")
        cache.put(b, b.stat().st_mtime, "b")
        cache.get(a)
        cache.put(c, c.stat().st_mtime, "c")
        assert cache.get(b) is None
        assert cache.get(a) == "a"
        assert cache.get(c) == "c"

    def test_invalidate(self, tmp_path):
        path = tmp_path / "a.py"
        path.write_text("x")
        cache = FileCache()
        cache.put(path, path.stat().st_mtime, "x")
        cache.invalidate(path)
        assert cache.get(path) is None


class TestLoadSource:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "a.py"
        path.write_text("def a():\n    pass\n")
        assert load_source(path) == ("def a():\n    pass\n", None)

    def test_missing_file(self, tmp_path):
        content, error = load_source(tmp_path / "missing.py")
        assert content is None
        assert error.startswith("Error reading file")

    def test_invalidate_rereads(self, tmp_path):
        path = tmp_path / "a.py"
        path.write_text("first\n")
        load_source(path)
        stat = path.stat()
        path.write_text("second\n")
        # Keep the mtime so only invalidation can expose the change
        os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns))
        assert load_source(path) == ("first\n", None)
        invalidate_file_cache(path)
        assert load_source(path) == ("second\n", None)
