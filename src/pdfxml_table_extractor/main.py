from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .columns import RangeColumnClassifier, range_column_classifier, variance_column_classifier
from .exceptions import TableConfigError
from .exporters import entries_to_rows, rows_to_csv
from .parser import parse_pdfxml
from .table import TableEntry, TableExtractionRequest, extract_table, non_empty_row

log = logging.getLogger(__name__)


def _ensure_parent_dir(csv_path: str) -> None:
    Path(csv_path).parent.mkdir(parents=True, exist_ok=True)


def _write_empty_csv(csv_path: str) -> None:
    _ensure_parent_dir(csv_path)
    with open(csv_path, "w", encoding="utf-8-sig", newline="") as fh:
        fh.write("")


def build_classifier(
    *,
    ranges: Optional[Sequence[Tuple[int, int]]] = None,
    positions: Optional[Sequence[int]] = None,
    variance: Optional[int] = None,
) -> RangeColumnClassifier:
    """Elige la estrategia de columnas: rangos explícitos o posiciones + varianza."""
    if ranges and positions:
        raise TableConfigError("Usa rangos o posiciones, no ambos.")
    if ranges:
        if variance is not None:
            raise TableConfigError("variance solo aplica junto con positions.")
        return range_column_classifier(ranges)
    if positions:
        if variance is None:
            raise TableConfigError("variance es requerido junto con positions.")
        return variance_column_classifier(positions, variance)
    raise TableConfigError("Se requieren rangos o posiciones de columna.")


def extract_page_table(
    xml_path: str,
    *,
    page: int = 1,
    from_top: int,
    to_top: int,
    ranges: Optional[Sequence[Tuple[int, int]]] = None,
    positions: Optional[Sequence[int]] = None,
    variance: Optional[int] = None,
    columns: Optional[int] = None,
    allowed_height_variance: int = 0,
    skip_empty: bool = False,
) -> List[TableEntry]:
    classifier = build_classifier(ranges=ranges, positions=positions, variance=variance)
    # la configuración se valida antes de tocar el documento
    request = TableExtractionRequest(
        from_top=from_top,
        to_top=to_top,
        columns=len(classifier) if columns is None else columns,
        column_func=classifier,
        allowed_height_variance=allowed_height_variance,
        filter_func=non_empty_row if skip_empty else None,
    )
    log.debug("Clasificador de columnas: %r", classifier)

    log.info("Parseando pdf2xml desde: %s", xml_path)
    document = parse_pdfxml(xml_path)
    pdf_page = document.page(page)
    if pdf_page is None:
        raise ValueError(f"La página {page} no existe en {xml_path} ({len(document.pages)} páginas).")

    entries = extract_table(pdf_page, request)
    log.info("Página %d: %d filas extraídas.", page, len(entries))
    return entries


def pdfxml_to_csv(
    xml_path: str,
    csv_path: str,
    *,
    page: int = 1,
    from_top: int,
    to_top: int,
    ranges: Optional[Sequence[Tuple[int, int]]] = None,
    positions: Optional[Sequence[int]] = None,
    variance: Optional[int] = None,
    columns: Optional[int] = None,
    allowed_height_variance: int = 0,
    header: Optional[Sequence[str]] = None,
    skip_empty: bool = False,
    prefer_bold: bool = False,
) -> None:
    """
    Orquesta la extracción: parseo del pdf2xml, agrupación en filas/columnas
    y exportación a CSV.
    """
    entries = extract_page_table(
        xml_path,
        page=page,
        from_top=from_top,
        to_top=to_top,
        ranges=ranges,
        positions=positions,
        variance=variance,
        columns=columns,
        allowed_height_variance=allowed_height_variance,
        skip_empty=skip_empty,
    )
    if not entries:
        log.warning("No se extrajeron filas en la banda [%d, %d]. Se generará un CSV vacío.", from_top, to_top)
        _write_empty_csv(csv_path)
        return

    rows = entries_to_rows(entries, prefer_bold=prefer_bold)
    _ensure_parent_dir(csv_path)
    rows_to_csv(rows, list(header) if header else [], csv_path)
    log.info("CSV escrito en: %s", csv_path)
