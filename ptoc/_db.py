"""Zapis spisu treści do PostgreSQL (tabela toc_entry, patrz db/schema.sql)."""

from __future__ import annotations

import os
from collections.abc import Sequence

import psycopg2
import psycopg2.extras

from data_model.toc import TocNode, iter_nodes


def get_connection() -> psycopg2.extensions.connection:
    return psycopg2.connect(
        host     = os.getenv("PGHOST",     "localhost"),
        port     = int(os.getenv("PGPORT", "5432")),
        dbname   = os.getenv("PGDATABASE", "ptoc"),
        user     = os.getenv("PGUSER",     "ptoc"),
        password = os.getenv("PGPASSWORD", "ptoc"),
    )


_UPSERT_SQL = """
    INSERT INTO toc_entry
        (doc_id, ordinal, title, page, level, parent_ordinal, full_path, source)
    VALUES %s
    ON CONFLICT (doc_id, ordinal) DO UPDATE SET
        title          = EXCLUDED.title,
        page           = EXCLUDED.page,
        level          = EXCLUDED.level,
        parent_ordinal = EXCLUDED.parent_ordinal,
        full_path      = EXCLUDED.full_path,
        source         = EXCLUDED.source
"""


def toc_rows(doc_id: str, nodes: Sequence[TocNode], source: str) -> list[tuple]:
    """Spłaszcza las do wierszy; ordinal = pozycja w kolejności dokumentu."""
    ordinals: dict[int, int] = {}
    rows: list[tuple] = []
    for ordinal, node in enumerate(iter_nodes(nodes)):
        ordinals[id(node)] = ordinal
        parent = ordinals.get(id(node.parent)) if node.parent is not None else None
        rows.append((
            doc_id, ordinal, node.title, node.page, node.level,
            parent, node.full_path(), source,
        ))
    return rows


def upsert_toc(conn, doc_id: str, nodes: Sequence[TocNode], source: str) -> int:
    """Zastępuje wpisy dokumentu; zwraca liczbę zapisanych wierszy."""
    rows = toc_rows(doc_id, nodes, source)
    with conn.cursor() as cur:
        cur.execute("DELETE FROM toc_entry WHERE doc_id = %s", (doc_id,))
        if rows:
            psycopg2.extras.execute_values(cur, _UPSERT_SQL, rows)
    return len(rows)
