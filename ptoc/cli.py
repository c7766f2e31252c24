"""
ptoc — ekstrakcja spisu treści z dokumentów PDF.

Użycie:
  ptoc <komenda> [opcje]

Komendy:
  extract       Spis treści z zakładek (outline) PDF.
  semantic      Spis treści odtworzony z analizy nagłówków w tekście.
  smart         Zakładki, a gdy ich brak — analiza semantyczna.
  diagnose      Raport o pliku PDF i wynikach analizy.
  apply-schema  Aplikuje db/schema.sql do bazy danych (idempotentne).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ptoc.commands import apply_schema as cmd_apply_schema
from ptoc.commands import diagnose as cmd_diagnose
from ptoc.commands import extract as cmd_extract
from ptoc.commands import semantic as cmd_semantic
from ptoc.commands import smart as cmd_smart
from ptoc.commands._common import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ptoc",
        description="ptoc — spis treści z dokumentów PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ptoc 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_semantic.add_parser(subparsers)
    cmd_smart.add_parser(subparsers)
    cmd_diagnose.add_parser(subparsers)
    cmd_apply_schema.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(args, "debug", False))
    args.func(args)


if __name__ == "__main__":
    main()
