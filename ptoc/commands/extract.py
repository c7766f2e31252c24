"""Komenda: ptoc extract — spis treści z zakładek PDF."""

from __future__ import annotations

import argparse

from ptoc.commands._common import (
    add_input_argument,
    add_output_arguments,
    check_input,
    console,
    emit,
)


def run(args: argparse.Namespace) -> None:
    from pdf.bookmarks import extract_bookmarks
    from pdf.errors import NoBookmarksError, PdfReadError

    pdf_path = check_input(args.pdf_file)
    if args.verbose:
        console.print(f"Odczyt zakładek: [bold]{pdf_path}[/bold] …")

    try:
        nodes = extract_bookmarks(pdf_path)
    except NoBookmarksError as e:
        console.print(f"[yellow]{e}.[/yellow]")
        console.print("Użyj [bold]ptoc smart[/bold] lub [bold]ptoc semantic[/bold], żeby odtworzyć spis z treści.")
        raise SystemExit(1)
    except PdfReadError as e:
        console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)

    emit(nodes, args, source="bookmarks")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Spis treści z zakładek (outline) PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odczytuje osadzone zakładki PDF i eksportuje je jako spis treści.
Gdy dokument nie ma zakładek, komenda kończy się kodem 1.

Przykłady:
  ptoc extract raport.pdf
  ptoc extract raport.pdf -o spis.md
  ptoc extract raport.pdf --format json --max-depth 2
        """,
    )
    add_input_argument(p)
    add_output_arguments(p)
    p.set_defaults(func=run)
