"""Komenda: ptoc apply-schema — tworzy tabelę toc_entry z db/schema.sql."""

from __future__ import annotations

import argparse
import pathlib

from rich.console import Console

console = Console()

ROOT        = pathlib.Path(__file__).resolve().parent.parent.parent
SCHEMA_PATH = ROOT / "db" / "schema.sql"


def split_statements(sql: str) -> list[str]:
    """Dzieli SQL na instrukcje zakończone średnikiem na końcu linii; pomija komentarze."""
    stmts: list[str] = []
    buf:   list[str] = []

    for line in sql.splitlines():
        if line.lstrip().startswith("--"):
            continue
        buf.append(line)
        if line.rstrip().endswith(";"):
            stmt = "\n".join(buf).strip()
            if stmt:
                stmts.append(stmt)
            buf = []

    remaining = "\n".join(buf).strip()
    if remaining:
        stmts.append(remaining)
    return stmts


def run(args: argparse.Namespace) -> None:
    from ptoc._db import get_connection

    if not SCHEMA_PATH.exists():
        console.print(f"[red]Brak pliku schematu:[/red] {SCHEMA_PATH}")
        raise SystemExit(1)

    stmts = split_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        with conn, conn.cursor() as cur:
            for stmt in stmts:
                cur.execute(stmt)
    except Exception as e:
        console.print(f"[red]Błąd wykonania schematu:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]Schemat zastosowany:[/green] {SCHEMA_PATH} ({len(stmts)} instrukcji)")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "apply-schema",
        help="Tworzy tabelę toc_entry (db/schema.sql, idempotentne).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wykonuje db/schema.sql przeciwko bazie PostgreSQL z PGHOST/PGPORT/PGDATABASE/PGUSER/PGPASSWORD.
Instrukcje używają IF NOT EXISTS — bezpieczne do wielokrotnego uruchomienia.

Przykład:
  ptoc apply-schema
        """,
    )
    p.set_defaults(func=run)
