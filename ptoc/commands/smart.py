"""Komenda: ptoc smart — zakładki, a gdy ich brak: analiza semantyczna."""

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
    from pdf.toc_extractor import extract_toc_smart

    pdf_path = check_input(args.pdf_file)
    options = options_from_args(args)

    if args.verbose:
        console.print(f"Przetwarzanie: [bold]{pdf_path}[/bold] (zakładki → analiza semantyczna)")

    try:
        result = extract_toc_smart(pdf_path, options)
    except PdfReadError as e:
        console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)

    if args.verbose and result.source == "semantic":
        console.print("[yellow]Brak zakładek — użyto analizy semantycznej.[/yellow]")

    if not result.nodes:
        suggest_relaxation()
        return

    emit(result.nodes, args, source=result.source)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "smart",
        help="Zakładki PDF, a gdy ich brak — analiza semantyczna.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Najpierw próbuje odczytać zakładki PDF. Jeśli dokument ich nie ma,
odtwarza spis treści analizą semantyczną (opcje jak w 'ptoc semantic').

Przykłady:
  ptoc smart dokument.pdf
  ptoc smart dokument.pdf -o spis.xml -v
        """,
    )
    add_input_argument(p)
    add_output_arguments(p)
    add_analysis_arguments(p)
    p.set_defaults(func=run)
