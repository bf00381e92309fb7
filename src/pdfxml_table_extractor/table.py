# src/pdfxml_table_extractor/table.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Union

from .columns import ColumnClassifier
from .exceptions import TableConfigError
from .selector import select_fragments
from .structures import Page, TextFragment

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellContent:
    text: str                        # texto normal del fragmento
    bold_text: Optional[str] = None  # texto dentro de <b>


@dataclass
class TableEntry:
    """Una fila extraída.

    La caja (min/max de left y top) queda indefinida (None) hasta que la fila
    recibe su primer fragmento clasificado. `content` siempre tiene tantas
    posiciones como columnas tiene la tabla.
    """
    content: List[Optional[CellContent]]
    min_left: Optional[int] = None
    max_left: Optional[int] = None
    min_top: Optional[int] = None
    max_top: Optional[int] = None
    _pivot: Optional[int] = field(default=None, repr=False, compare=False)

    @classmethod
    def open(cls, pivot: int, columns: int) -> "TableEntry":
        return cls(content=[None] * columns, _pivot=pivot)

    @property
    def is_open(self) -> bool:
        return self._pivot is not None

    @property
    def is_empty(self) -> bool:
        return all(c is None for c in self.content)

    def is_same_line(self, fragment: TextFragment, variance: int) -> bool:
        # Solo mira hacia abajo: un top menor que el pivot también pasa.
        # El selector garantiza el orden ascendente, así que no ocurre.
        return fragment.top - self._pivot <= variance

    def close(self) -> None:
        self._pivot = None

    def put(self, column: int, fragment: TextFragment) -> None:
        self.content[column] = CellContent(text=fragment.text, bold_text=fragment.bold_text)

        if self.min_left is None or fragment.left < self.min_left:
            self.min_left = fragment.left
        if self.max_left is None or fragment.left > self.max_left:
            self.max_left = fragment.left
        if self.min_top is None or fragment.top < self.min_top:
            self.min_top = fragment.top
        if self.max_top is None or fragment.top > self.max_top:
            self.max_top = fragment.top

    def texts(self, prefer_bold: bool = False) -> List[str]:
        out: List[str] = []
        for cell in self.content:
            if cell is None:
                out.append("")
            elif prefer_bold and cell.bold_text:
                out.append(cell.bold_text)
            else:
                out.append(cell.text or cell.bold_text or "")
        return out


RowValidator = Callable[[TableEntry], bool]


def non_empty_row(entry: TableEntry) -> bool:
    """Validador que descarta filas sin ninguna celda asignada."""
    return not entry.is_empty


@dataclass
class TableExtractionRequest:
    """Configuración de la tabla a extraer.

    from_top/to_top: banda vertical (inclusiva) donde está la tabla.
    columns: número fijo de columnas.
    column_func: estrategia que asigna cada fragmento a una columna.
    allowed_height_variance: cuánto puede bajar `top` y seguir en la misma fila.
    filter_func: si se define y devuelve False, la fila se descarta.
    """
    from_top: int
    to_top: int
    columns: int
    column_func: ColumnClassifier
    allowed_height_variance: int = 0
    filter_func: Optional[RowValidator] = None

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise TableConfigError(f"columns debe ser >= 1 (recibido {self.columns})")
        if self.to_top < self.from_top:
            raise TableConfigError(f"Banda vertical inválida: [{self.from_top}, {self.to_top}]")
        if self.allowed_height_variance < 0:
            raise TableConfigError(
                f"allowed_height_variance no puede ser negativa: {self.allowed_height_variance}"
            )
        if not callable(self.column_func):
            raise TableConfigError("column_func debe ser invocable.")
        if self.filter_func is not None and not callable(self.filter_func):
            raise TableConfigError("filter_func debe ser invocable o None.")
        n_ranges = len(self.column_func) if hasattr(self.column_func, "__len__") else None
        if n_ranges is not None and n_ranges > self.columns:
            raise TableConfigError(
                f"El clasificador define {n_ranges} columnas pero la tabla solo tiene {self.columns}"
            )


def _keep(entry: TableEntry, request: TableExtractionRequest) -> bool:
    entry.close()
    if request.filter_func is None:
        return True
    return bool(request.filter_func(entry))


def extract_table(source: Union[Page, Iterable[TextFragment]],
                  request: TableExtractionRequest
                  ) -> List[TableEntry]:
    """
    Agrupa los fragmentos de la banda en filas y cada fragmento en su columna.

    Una fila queda abierta mientras `fragment.top - pivot <= allowed_height_variance`.
    Al abrirse la siguiente, la anterior se cierra y pasa por `filter_func`:
    si la rechaza no llega al resultado y la nueva ocupa su lugar. La última
    fila se valida al terminar el recorrido.
    Los fragmentos sin columna se ignoran: no escriben celda ni mueven la caja.
    """
    fragments = source.texts if isinstance(source, Page) else source
    texts = select_fragments(fragments, request.from_top, request.to_top)

    table: List[TableEntry] = []
    pending: Optional[TableEntry] = None
    dropped = rejected = 0

    for text in texts:
        if pending is None or not pending.is_same_line(text, request.allowed_height_variance):
            if pending is not None:
                if _keep(pending, request):
                    table.append(pending)
                else:
                    rejected += 1
            pending = TableEntry.open(text.top, request.columns)

        column = request.column_func(text)
        if column is None:
            dropped += 1
            log.debug("Fragmento sin columna (top=%d, left=%d): %r", text.top, text.left, text.text)
            continue
        if not 0 <= column < request.columns:
            raise TableConfigError(
                f"column_func devolvió {column}, fuera de [0, {request.columns})"
            )

        pending.put(column, text)

    if pending is not None:
        if _keep(pending, request):
            table.append(pending)
        else:
            rejected += 1

    log.debug("Tabla: %d fragmentos, %d filas, %d descartadas, %d fragmentos sin columna",
              len(texts), len(table), rejected, dropped)
    return table
