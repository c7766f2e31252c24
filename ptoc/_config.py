"""
Konfiguracja ze zmiennych środowiskowych (opcjonalnie z pliku .env w katalogu głównym).

Zmienne:
  PTOC_MODE         preset analizy: default | strict | relaxed | debug
  PTOC_SKIP_PAGES   strony pomijane, np. "1,2,3" lub "1-3" (pusty napis = żadne)
  PTOC_CONFIDENCE   minimalny próg pewności (0.0 – 1.0)
  PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD — baza dla --save-db
"""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

from data_model.options import AnalysisOptions, parse_skip_pages

ROOT = pathlib.Path(__file__).resolve().parent.parent
load_dotenv(ROOT / ".env", override=False)


def env_mode(default: str = "default") -> str:
    return os.getenv("PTOC_MODE", default).strip().lower() or default


def env_options(mode: str | None = None) -> AnalysisOptions:
    """Preset (argument lub PTOC_MODE) z nadpisaniami ze środowiska."""
    options = AnalysisOptions.preset(mode or env_mode())

    skip = os.getenv("PTOC_SKIP_PAGES")
    if skip is not None:
        options = options.with_overrides(skip_pages=parse_skip_pages(skip))

    confidence = os.getenv("PTOC_CONFIDENCE")
    if confidence:
        try:
            options = options.with_overrides(min_confidence_threshold=float(confidence))
        except ValueError:
            raise ValueError(f"PTOC_CONFIDENCE musi być liczbą, otrzymano: {confidence!r}") from None

    return options
