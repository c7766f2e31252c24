"""Komenda: ptoc diagnose — raport o pliku PDF i wynikach analizy nagłówków."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from rich import box
from rich.markup import escape
from rich.table import Table

from data_model.fragments import TextFragment
from ptoc.commands._common import (
    add_analysis_arguments,
    add_input_argument,
    check_input,
    console,
    options_from_args,
)

PDF_MAGIC = b"%PDF-"


def read_header(pdf_path: Path) -> bytes:
    with pdf_path.open("rb") as fh:
        return fh.read(len(PDF_MAGIC))


def run(args: argparse.Namespace) -> None:
    from pdf.bookmarks import count_bookmarks
    from pdf.errors import PdfReadError
    from pdf.text_extractor import open_document
    from pdf.toc_extractor import analyze_document
    from semantic.analyzer import summarize_analysis

    pdf_path = check_input(args.pdf_file)
    options = options_from_args(args)

    console.print(f"[bold]Diagnostyka:[/bold] {pdf_path}")
    console.print(f"  rozmiar:   {pdf_path.stat().st_size} B")

    header = read_header(pdf_path)
    if header != PDF_MAGIC:
        console.print(f"[red]Nieprawidłowy nagłówek pliku:[/red] {header!r} (oczekiwano {PDF_MAGIC!r})")
        raise SystemExit(1)
    console.print("  nagłówek:  [green]OK[/green]")

    try:
        doc = open_document(pdf_path)
    except PdfReadError as e:
        console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)

    try:
        console.print(f"  stron:     {doc.page_count}")
        console.print(f"  szyfrowany: {'tak' if doc.is_encrypted else 'nie'}")
        bookmarks = count_bookmarks(doc)
    finally:
        doc.close()

    if bookmarks:
        console.print(f"  zakładki:  [green]{bookmarks}[/green]")
    else:
        console.print("  zakładki:  [yellow]brak[/yellow] (użyj 'ptoc semantic' lub 'ptoc smart')")

    console.print(f"\n[dim]{options.describe()}[/dim]")
    fragments, headings = analyze_document(pdf_path, options)
    summary = summarize_analysis(fragments, headings)

    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white", expand=False)
    table.add_column("METRYKA", style="bold", no_wrap=True)
    table.add_column("WARTOŚĆ", justify="right")
    table.add_row("fragmenty", str(summary.total_fragments))
    table.add_row("nagłówki", str(summary.heading_count))
    table.add_row("śr. pewność", f"{summary.average_confidence:.2f}")
    table.add_row("śr. rozmiar fontu", f"{summary.average_font_size:.1f}")
    table.add_row("pogrubione", str(summary.bold_count))
    for level, n in summary.headings_by_level.items():
        table.add_row(f"poziom {level}", str(n))
    console.print(table)

    if headings and args.top:
        _print_headings(headings[: args.top])


def _print_headings(headings: Sequence[TextFragment]) -> None:
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", row_styles=["", "dim"])
    table.add_column("S.", justify="right", no_wrap=True)
    table.add_column("POZ.", justify="center", no_wrap=True)
    table.add_column("PEWN.", justify="right", no_wrap=True)
    table.add_column("TEKST", max_width=60)
    table.add_column("SYGNAŁY", style="cyan", max_width=50)

    for h in headings:
        result = h.result
        table.add_row(
            str(h.page_number),
            str(result.level),
            f"{result.confidence:.2f}",
            escape(h.text.strip()),
            ", ".join(result.reasons),
        )
    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "diagnose",
        help="Raport o pliku PDF: nagłówek, strony, zakładki, statystyki analizy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Sprawdza plik PDF (nagłówek %PDF-, liczba stron, szyfrowanie, zakładki)
i pokazuje statystyki analizy semantycznej oraz wykryte nagłówki.

Przykłady:
  ptoc diagnose dokument.pdf
  ptoc diagnose dokument.pdf --mode relaxed --top 40
        """,
    )
    add_input_argument(p)
    add_analysis_arguments(p)
    p.add_argument("--top", type=int, default=20, metavar="N", help="Ile nagłówków pokazać (0 = żadnego).")
    p.set_defaults(func=run)
