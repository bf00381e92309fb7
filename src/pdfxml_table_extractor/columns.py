from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union
from .exceptions import TableConfigError
from .structures import TextFragment

# Devuelve el índice de columna o None si ningún rango contiene al fragmento.
ColumnClassifier = Callable[[TextFragment], Optional[int]]


@dataclass(frozen=True)
class ColumnRange:
    """Límites horizontales (inclusivos) donde puede empezar una columna."""
    from_left: int
    to_left: int

    def __post_init__(self) -> None:
        if self.from_left > self.to_left:
            raise TableConfigError(
                f"Rango de columna inválido: from_left={self.from_left} > to_left={self.to_left}"
            )

    def contains(self, left: int) -> bool:
        return self.from_left <= left <= self.to_left


RangeLike = Union[ColumnRange, Tuple[int, int]]


class RangeColumnClassifier:
    """Asigna la columna por el primer rango (en orden de lista) que contiene `left`.

    Si los rangos se solapan gana el que aparece antes.
    """

    def __init__(self, ranges: Sequence[RangeLike]):
        parsed = []
        for r in ranges:
            if isinstance(r, ColumnRange):
                parsed.append(r)
            else:
                try:
                    lo, hi = r
                except (TypeError, ValueError) as exc:
                    raise TableConfigError(f"Rango de columna mal formado: {r!r}") from exc
                parsed.append(ColumnRange(int(lo), int(hi)))
        if not parsed:
            raise TableConfigError("Se requiere al menos un rango de columna.")
        self.ranges: Tuple[ColumnRange, ...] = tuple(parsed)

    def __call__(self, fragment: TextFragment) -> Optional[int]:
        for i, r in enumerate(self.ranges):
            if r.contains(fragment.left):
                return i
        return None

    def __len__(self) -> int:
        return len(self.ranges)

    def __repr__(self) -> str:
        spans = ", ".join(f"[{r.from_left},{r.to_left}]" for r in self.ranges)
        return f"RangeColumnClassifier({spans})"


def range_column_classifier(ranges: Sequence[RangeLike]) -> RangeColumnClassifier:
    return RangeColumnClassifier(ranges)


def variance_column_classifier(positions: Sequence[int],
                               tolerance: int
                               ) -> RangeColumnClassifier:
    """
    Construye rangos [p - tolerance//2, p + tolerance//2] alrededor de la
    posición representativa de cada columna. Con tolerancia impar la
    división entera deja la ventana un punto más estrecha.
    """
    if tolerance < 0:
        raise TableConfigError(f"La tolerancia no puede ser negativa: {tolerance}")
    half = tolerance // 2
    return RangeColumnClassifier([ColumnRange(p - half, p + half) for p in positions])
