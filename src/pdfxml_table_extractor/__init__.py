from .columns import ColumnClassifier, ColumnRange, RangeColumnClassifier, range_column_classifier, variance_column_classifier
from .exceptions import PdfXmlParseError, TableConfigError, TableExtractionError
from .parser import parse_pdfxml, parse_pdfxml_string
from .selector import select_fragments
from .structures import Document, FontSpec, Outline, OutlineItem, Page, TextFragment
from .table import CellContent, RowValidator, TableEntry, TableExtractionRequest, extract_table, non_empty_row

__all__ = [
    "CellContent",
    "ColumnClassifier",
    "ColumnRange",
    "Document",
    "FontSpec",
    "Outline",
    "OutlineItem",
    "Page",
    "PdfXmlParseError",
    "RangeColumnClassifier",
    "RowValidator",
    "TableConfigError",
    "TableEntry",
    "TableExtractionError",
    "TableExtractionRequest",
    "TextFragment",
    "extract_table",
    "non_empty_row",
    "parse_pdfxml",
    "parse_pdfxml_string",
    "range_column_classifier",
    "select_fragments",
    "variance_column_classifier",
]
