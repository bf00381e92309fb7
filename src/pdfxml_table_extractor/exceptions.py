from __future__ import annotations


class TableExtractionError(Exception):
    """Base de los errores del extractor."""


class TableConfigError(TableExtractionError, ValueError):
    """Configuración inválida (columnas, rangos, tolerancias, callables)."""


class PdfXmlParseError(TableExtractionError):
    """El documento de entrada no es un pdf2xml válido."""
