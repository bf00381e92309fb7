from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .table import TableEntry, TableExtractionRequest


@dataclass(frozen=True)
class TextFragment:
    """Un fragmento de texto posicionado (elemento <text> de pdf2xml).

    Coordenadas enteras con origen arriba a la izquierda: `top` crece hacia
    abajo y `left` hacia la derecha.
    """
    top: int
    left: int
    width: int
    height: int
    text: str = ""
    bold_text: Optional[str] = None
    font: Optional[int] = None

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def right(self) -> int:
        return self.left + self.width


@dataclass(frozen=True)
class FontSpec:
    id: Optional[int] = None
    size: Optional[int] = None
    family: Optional[str] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class OutlineItem:
    page: Optional[int]
    title: str


@dataclass
class Outline:
    """Nodo del índice (bookmarks); puede anidar otros outlines."""
    items: List[OutlineItem] = field(default_factory=list)
    children: List["Outline"] = field(default_factory=list)


@dataclass
class Page:
    number: Optional[int] = None
    position: Optional[str] = None
    top: Optional[int] = None
    left: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    fontspecs: List[FontSpec] = field(default_factory=list)
    texts: List[TextFragment] = field(default_factory=list)

    def extract_table(self, request: "TableExtractionRequest") -> List["TableEntry"]:
        from .table import extract_table
        return extract_table(self, request)


@dataclass
class Document:
    producer: Optional[str] = None
    version: Optional[str] = None
    pages: List[Page] = field(default_factory=list)
    outlines: List[Outline] = field(default_factory=list)

    def page(self, number: int) -> Optional[Page]:
        """Busca una página por su atributo `number` (1-based en pdftohtml)."""
        for p in self.pages:
            if p.number == number:
                return p
        return None
