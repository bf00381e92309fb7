# src/pdfxml_table_extractor/exporters.py
from __future__ import annotations
from typing import List, Optional, Sequence
import csv
import pandas as pd
from .table import TableEntry

BBOX_COLUMNS = ["min_left", "max_left", "min_top", "max_top"]

def clean_cell_text(text: str) -> str:
    # pdftohtml deja espacios y saltos de línea alrededor del texto
    return " ".join(text.split())

def entries_to_rows(entries: Sequence[TableEntry], *, prefer_bold: bool = False) -> List[List[str]]:
    return [[clean_cell_text(c) for c in e.texts(prefer_bold=prefer_bold)] for e in entries]

def rows_to_csv(rows: List[List[str]], header: List[str], csv_path: str) -> None:
    with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
        w = csv.writer(f)
        if header:
            w.writerow(header)
        w.writerows(rows)

def _column_names(n: int, header: Optional[Sequence[str]]) -> List[str]:
    names = []
    for idx in range(n):
        if header and idx < len(header) and header[idx]:
            names.append(str(header[idx]))
        else:
            names.append(f"col_{idx + 1}")
    return names

def entries_to_dataframe(entries: Sequence[TableEntry],
                         header: Optional[Sequence[str]] = None,
                         *,
                         prefer_bold: bool = False) -> pd.DataFrame:
    """
    Una fila del DataFrame por entrada: una columna por celda y la caja
    (min/max de left y top) al final. Celdas vacías quedan como "".
    """
    n_cols = len(entries[0].content) if entries else len(header or [])
    names = _column_names(n_cols, header)
    records = []
    for e, cells in zip(entries, entries_to_rows(entries, prefer_bold=prefer_bold)):
        rec = dict(zip(names, cells))
        rec.update(min_left=e.min_left, max_left=e.max_left, min_top=e.min_top, max_top=e.max_top)
        records.append(rec)
    df = pd.DataFrame.from_records(records, columns=names + BBOX_COLUMNS)
    return df.astype({c: "Int64" for c in BBOX_COLUMNS})
