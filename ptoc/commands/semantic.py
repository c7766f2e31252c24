"""Komenda: ptoc semantic — spis treści odtworzony z układu i treści tekstu."""

from __future__ import annotations

import argparse

from ptoc.commands._common import (
    add_analysis_arguments,
    add_input_argument,
    add_output_arguments,
    check_input,
    console,
    emit,
    options_from_args,
    suggest_relaxation,
)


def run(args: argparse.Namespace) -> None:
    from pdf.errors import PdfReadError
    from pdf.toc_extractor import analyze_document
    from semantic.analyzer import summarize_analysis
    from semantic.hierarchy import build_toc_tree

    pdf_path = check_input(args.pdf_file)
    options = options_from_args(args)

    if args.verbose:
        console.print(f"Analiza semantyczna: [bold]{pdf_path}[/bold]")
        console.print(f"[dim]{options.describe()}[/dim]")

    try:
        fragments, headings = analyze_document(pdf_path, options)
    except PdfReadError as e:
        console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)

    if args.verbose:
        summary = summarize_analysis(fragments, headings)
        console.print(
            f"Fragmentów: [bold]{summary.total_fragments}[/bold]  "
            f"nagłówków: [bold]{summary.heading_count}[/bold]  "
            f"śr. pewność: {summary.average_confidence:.2f}"
        )

    nodes = build_toc_tree(headings)
    if not nodes:
        suggest_relaxation()
        return

    emit(nodes, args, source="semantic", default_title="Spis treści (analiza semantyczna)")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "semantic",
        help="Odtwarza spis treści z analizy nagłówków w tekście.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wykrywa nagłówki heurystycznie (numeracja, słowa kluczowe, rozmiar i grubość
fontu, odstępy) i buduje z nich hierarchię. Działa dla PDF bez zakładek.

Przykłady:
  ptoc semantic instrukcja.pdf
  ptoc semantic instrukcja.pdf --mode relaxed --skip-pages 1-2
  ptoc semantic instrukcja.pdf --confidence 0.2 --debug
  ptoc semantic instrukcja.pdf -o spis.json --show
        """,
    )
    add_input_argument(p)
    add_output_arguments(p)
    add_analysis_arguments(p)
    p.set_defaults(func=run)
