"""
exporters — serializacja lasu TocNode do text / markdown / json / xml.

Publiczne API:
  get_exporter(format)                     -> Exporter
  format_for_path(path)                    -> str | None
  supported_formats()                      -> list[str]
  ExportOptions, UnsupportedFormatError
"""

from __future__ import annotations

from pathlib import Path

from .base import DEFAULT_TITLE, ExportOptions, Exporter
from .json_export import JsonExporter
from .markdown import MarkdownExporter
from .text import TextExporter
from .xml_export import XmlExporter


class UnsupportedFormatError(ValueError):
    """Nieobsługiwany format eksportu."""


_EXPORTERS: dict[str, Exporter] = {
    "text":     TextExporter(),
    "txt":      TextExporter(),
    "markdown": MarkdownExporter(),
    "md":       MarkdownExporter(),
    "json":     JsonExporter(),
    "xml":      XmlExporter(),
}


def supported_formats() -> list[str]:
    return sorted(_EXPORTERS)


def get_exporter(fmt: str) -> Exporter:
    key = (fmt or "").strip().lower()
    if not key:
        raise UnsupportedFormatError("Format eksportu nie może być pusty")
    try:
        return _EXPORTERS[key]
    except KeyError:
        raise UnsupportedFormatError(
            f"Nieobsługiwany format: {fmt}. Obsługiwane: {', '.join(supported_formats())}"
        ) from None


def format_for_path(path: str | Path) -> str | None:
    """Format wnioskowany z rozszerzenia pliku wyjściowego; None gdy nieznane."""
    ext = Path(path).suffix.lstrip(".").lower()
    return ext if ext in _EXPORTERS else None


__all__ = [
    "DEFAULT_TITLE",
    "ExportOptions",
    "Exporter",
    "TextExporter",
    "MarkdownExporter",
    "JsonExporter",
    "XmlExporter",
    "UnsupportedFormatError",
    "get_exporter",
    "format_for_path",
    "supported_formats",
]
