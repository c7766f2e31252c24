"""Wspólne argumenty i wyjście komend ptoc (eksport, podgląd, zapis do bazy)."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.tree import Tree

from data_model.options import PRESET_NAMES, AnalysisOptions, parse_skip_pages
from data_model.toc import TocNode, count_nodes
from exporters import ExportOptions, UnsupportedFormatError, format_for_path, get_exporter

console = Console(stderr=True)

_PREVIEW_CHILDREN = 8


def setup_logging(debug: bool = False) -> None:
    """RichHandler na konsoli stderr; DEBUG tylko w trybie diagnostycznym."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Argumenty
# ---------------------------------------------------------------------------

def add_input_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument("pdf_file", metavar="PLIK.pdf", help="Ścieżka do pliku PDF.")


def add_output_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format", "-f",
        metavar="FORMAT",
        help="Format wyjścia: text, markdown, json, xml (domyślnie: z rozszerzenia --output lub text).",
    )
    p.add_argument("--output", "-o", metavar="PLIK", help="Zapisz wynik do pliku zamiast na stdout.")
    p.add_argument(
        "--max-depth", "-d",
        type=int,
        default=0,
        metavar="N",
        help="Maksymalna liczba poziomów (0 = bez limitu).",
    )
    p.add_argument("--no-pages", action="store_true", help="Pomiń numery stron.")
    p.add_argument("--links", action="store_true", help="Linki do stron (markdown).")
    p.add_argument("--title", "-t", metavar="TYTUŁ", help="Własny tytuł spisu treści.")
    p.add_argument("--indent", default="  ", metavar="NAPIS", help="Wcięcie na poziom (domyślnie: 2 spacje).")
    p.add_argument("--page-format", default="s. {}", metavar="FMT", help="Format strony (domyślnie: 's. {}').")
    p.add_argument("--show", action="store_true", help="Pokaż drzewo spisu treści w terminalu.")
    p.add_argument("--save-db", metavar="DOC_ID", help="Zapisz spis treści do tabeli toc_entry.")
    p.add_argument("--verbose", "-v", action="store_true", help="Szczegółowe komunikaty.")


def add_analysis_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--mode",
        choices=list(PRESET_NAMES),
        default=None,
        help="Preset analizy (domyślnie: PTOC_MODE lub default).",
    )
    p.add_argument(
        "--skip-pages",
        metavar="STRONY",
        default=None,
        help="Pomijane strony, np. '1,2,3' lub '1-3'; '' = żadne (domyślnie: 1,2,3).",
    )
    p.add_argument("--confidence", type=float, default=None, metavar="X", help="Minimalny próg pewności (0.0–1.0).")
    p.add_argument("--font-multiplier", type=float, default=None, metavar="X", help="Mnożnik 'dużego fontu'.")
    p.add_argument("--debug", action="store_true", help="Diagnostyka klasyfikacji w logu.")


def options_from_args(args: argparse.Namespace) -> AnalysisOptions:
    """
    Kolejność: preset < zmienne środowiskowe < flagi CLI.

    Tryb diagnostyczny (--debug, --mode debug lub PTOC_MODE=debug) włącza log DEBUG.
    """
    from ptoc._config import env_options

    try:
        options = env_options(getattr(args, "mode", None))
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    skip = getattr(args, "skip_pages", None)
    options = options.with_overrides(
        skip_pages=parse_skip_pages(skip) if skip is not None else None,
        min_confidence_threshold=getattr(args, "confidence", None),
        font_size_multiplier=getattr(args, "font_multiplier", None),
        debug_mode=True if getattr(args, "debug", False) else None,
    )
    if options.debug_mode:
        setup_logging(debug=True)
    return options


# ---------------------------------------------------------------------------
# Wyjście
# ---------------------------------------------------------------------------

def check_input(pdf_file: str) -> Path:
    pdf_path = Path(pdf_file)
    if not pdf_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {pdf_path}")
        raise SystemExit(1)
    if pdf_path.suffix.lower() != ".pdf":
        console.print(f"[red]Oczekiwano pliku .pdf, otrzymano:[/red] {pdf_path.suffix}")
        raise SystemExit(1)
    return pdf_path


def emit(nodes: list[TocNode], args: argparse.Namespace, source: str, default_title: str | None = None) -> None:
    """Eksportuje las na stdout / do pliku, opcjonalnie pokazuje drzewo i zapisuje do bazy."""
    export_options = ExportOptions(
        indent=args.indent,
        include_page_numbers=not args.no_pages,
        include_links=args.links,
        max_depth=args.max_depth,
        page_format=args.page_format,
        title=args.title or default_title,
    )

    fmt = args.format or (format_for_path(args.output) if args.output else None) or "text"
    try:
        exporter = get_exporter(fmt)
    except UnsupportedFormatError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if args.verbose:
        console.print(
            f"Źródło: [cyan]{source}[/cyan]  korzeni: [bold]{len(nodes)}[/bold]  "
            f"pozycji: [bold]{count_nodes(nodes)}[/bold]"
        )

    if args.output:
        out = exporter.export_to_file(nodes, args.output, export_options)
        console.print(f"[green]{exporter.format_name}:[/green] {out}")
    else:
        print(exporter.export(nodes, export_options), end="")

    if args.show:
        show_tree(nodes)

    if args.save_db:
        save_db(nodes, args.save_db, source)


def show_tree(nodes: list[TocNode], title: str = "Spis treści") -> None:
    tree = Tree(f"[bold]{title}[/bold]")

    def _add(branch: Tree, children: list[TocNode]) -> None:
        for i, node in enumerate(children):
            if i >= _PREVIEW_CHILDREN:
                branch.add(f"[dim]… jeszcze {len(children) - i} pozycji[/dim]")
                break
            sub = branch.add(f"{escape(node.title)} [dim](s. {escape(node.page)})[/dim]")
            _add(sub, node.children)

    _add(tree, nodes)
    console.print(tree)


def save_db(nodes: list[TocNode], doc_id: str, source: str) -> None:
    from ptoc._db import get_connection, upsert_toc

    try:
        conn = get_connection()
    except Exception as e:
        console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
        raise SystemExit(1)

    try:
        with conn:
            n = upsert_toc(conn, doc_id, nodes, source)
    except Exception as e:
        console.print(f"[red]Błąd zapisu do bazy:[/red] {e}")
        raise SystemExit(1)
    finally:
        conn.close()

    console.print(f"[green]DB:[/green] zapisano {n} pozycji dla doc_id='{doc_id}'")


def suggest_relaxation() -> None:
    console.print("[yellow]Nie rozpoznano żadnej struktury spisu treści.[/yellow]")
    console.print("Sugestie:")
    console.print("  - spróbuj [bold]--mode relaxed[/bold] (niższe progi)")
    console.print("  - obniż [bold]--confidence[/bold] (np. 0.2)")
    console.print("  - użyj [bold]--debug[/bold], żeby zobaczyć ocenę każdego fragmentu")
    console.print("  - sprawdź [bold]--skip-pages[/bold] (czy nie pomijasz stron z treścią)")
