"""
Database layer tests (no live PostgreSQL needed).

Covers row flattening for toc_entry and schema statement splitting.
"""

from ptoc._db import toc_rows, upsert_toc
from ptoc.commands.apply_schema import SCHEMA_PATH, split_statements
from semantic.hierarchy import TocEntry, build_tree


def sample_forest():
    return build_tree([
        TocEntry("Overview", "1", 1),
        TocEntry("Scope", "2", 2),
        TocEntry("Appendix", "9", 1),
    ])


def test_toc_rows_flatten_in_document_order():
    rows = toc_rows("doc-1", sample_forest(), "semantic")

    assert rows == [
        ("doc-1", 0, "Overview", "1", 0, None, "Overview", "semantic"),
        ("doc-1", 1, "Scope", "2", 1, 0, "Overview > Scope", "semantic"),
        ("doc-1", 2, "Appendix", "9", 0, None, "Appendix", "semantic"),
    ]


def test_toc_rows_empty():
    assert toc_rows("doc-1", [], "bookmarks") == []


class FakeCursor:
    def __init__(self):
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.executed.append((sql, params))


class FakeConnection:
    def __init__(self):
        self.cur = FakeCursor()

    def cursor(self):
        return self.cur


def test_upsert_empty_forest_only_deletes():
    conn = FakeConnection()

    n = upsert_toc(conn, "doc-1", [], "semantic")

    assert n == 0
    assert conn.cur.executed == [("DELETE FROM toc_entry WHERE doc_id = %s", ("doc-1",))]


def test_split_statements():
    sql = """
-- comment line
CREATE TABLE a (
    id INT
);
CREATE INDEX a_idx ON a (id);
"""
    stmts = split_statements(sql)

    assert len(stmts) == 2
    assert stmts[0].startswith("CREATE TABLE a")
    assert stmts[1] == "CREATE INDEX a_idx ON a (id);"


def test_schema_file_defines_toc_entry():
    stmts = split_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert any("CREATE TABLE IF NOT EXISTS toc_entry" in s for s in stmts)
