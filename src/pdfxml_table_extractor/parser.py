# src/pdfxml_table_extractor/parser.py
from __future__ import annotations
import logging
from typing import List, Optional, Union
from bs4 import BeautifulSoup, NavigableString, Tag
from .exceptions import PdfXmlParseError
from .structures import Document, FontSpec, Outline, OutlineItem, Page, TextFragment

log = logging.getLogger(__name__)

ROOT_TAG = "pdf2xml"


def _int_attr(el: Tag, name: str) -> Optional[int]:
    raw = el.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _str_attr(el: Tag, name: str) -> Optional[str]:
    raw = el.get(name)
    return str(raw) if raw is not None else None


def _parse_text(el: Tag) -> Optional[TextFragment]:
    top, left = _int_attr(el, "top"), _int_attr(el, "left")
    width, height = _int_attr(el, "width"), _int_attr(el, "height")
    if top is None or left is None or width is None or height is None:
        return None

    # solo el texto directo del nodo; el contenido de <b> va aparte
    plain = "".join(str(c) for c in el.children if isinstance(c, NavigableString))
    bold = el.find("b", recursive=False)

    return TextFragment(
        top=top, left=left, width=width, height=height,
        text=plain,
        bold_text=bold.get_text() if bold is not None else None,
        font=_int_attr(el, "font"),
    )


def _parse_page(el: Tag) -> Page:
    page = Page(
        number=_int_attr(el, "number"),
        position=_str_attr(el, "position"),
        top=_int_attr(el, "top"),
        left=_int_attr(el, "left"),
        width=_int_attr(el, "width"),
        height=_int_attr(el, "height"),
    )
    for fs in el.find_all("fontspec", recursive=False):
        page.fontspecs.append(FontSpec(
            id=_int_attr(fs, "id"),
            size=_int_attr(fs, "size"),
            family=_str_attr(fs, "family"),
            color=_str_attr(fs, "color"),
        ))

    skipped = 0
    for t in el.find_all("text", recursive=False):
        frag = _parse_text(t)
        if frag is None:
            skipped += 1
            continue
        page.texts.append(frag)
    if skipped:
        log.warning("Página %s: %d elementos <text> sin coordenadas completas, omitidos.",
                    page.number, skipped)
    return page


def _parse_outline(el: Tag) -> Outline:
    items = [OutlineItem(page=_int_attr(it, "page"), title=it.get_text())
             for it in el.find_all("item", recursive=False)]
    children = [_parse_outline(o) for o in el.find_all("outline", recursive=False)]
    return Outline(items=items, children=children)


def parse_pdfxml_string(text: Union[str, bytes]) -> Document:
    """
    Mapea un documento `pdftohtml -xml` a las entidades de `structures`.
    Es un mapeo estructural: no toma decisiones sobre el contenido.
    """
    soup = BeautifulSoup(text, "lxml-xml")
    root = soup.find(ROOT_TAG)
    if root is None:
        raise PdfXmlParseError(f"No se encontró el elemento raíz <{ROOT_TAG}>.")

    pages: List[Page] = [_parse_page(p) for p in root.find_all("page", recursive=False)]
    outlines = [_parse_outline(o) for o in root.find_all("outline", recursive=False)]
    log.debug("pdf2xml: %d páginas, %d outlines", len(pages), len(outlines))

    return Document(
        producer=_str_attr(root, "producer"),
        version=_str_attr(root, "version"),
        pages=pages,
        outlines=outlines,
    )


def parse_pdfxml(xml_path: str) -> Document:
    with open(xml_path, "rb") as f:
        raw = f.read()
    return parse_pdfxml_string(raw)
