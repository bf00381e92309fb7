"""Tests for the pdf2xml mapping into the positioned text model."""

from __future__ import annotations

import pytest

from conftest import SAMPLE_PDFXML
from pdfxml_table_extractor import FontSpec, OutlineItem, PdfXmlParseError, TextFragment, parse_pdfxml, parse_pdfxml_string


@pytest.mark.smoke
def test_document_attributes(sample_xml_path):
    doc = parse_pdfxml(str(sample_xml_path))

    assert doc.producer == "poppler"
    assert doc.version == "22.02.0"
    assert [p.number for p in doc.pages] == [1, 2]


def test_page_attributes_and_fontspecs():
    page = parse_pdfxml_string(SAMPLE_PDFXML).pages[0]

    assert page.position == "absolute"
    assert (page.top, page.left, page.width, page.height) == (0, 0, 892, 1263)
    assert page.fontspecs == [
        FontSpec(id=0, size=12, family="Times", color="#000000"),
        FontSpec(id=1, size=10, family="Helvetica", color="#333333"),
    ]


def test_texts_keep_document_order_and_skip_incomplete():
    page = parse_pdfxml_string(SAMPLE_PDFXML).pages[0]

    assert len(page.texts) == 9
    assert page.texts[0] == TextFragment(top=40, left=50, width=300, height=18, text="Report title", font=0)
    assert all(t.text != "broken" for t in page.texts)


def test_bold_content_is_separate_from_plain_text():
    page = parse_pdfxml_string(SAMPLE_PDFXML).pages[0]
    header = page.texts[1]

    assert header.text == ""
    assert header.bold_text == "Name"
    assert page.texts[3].bold_text is None


def test_outlines_are_nested():
    doc = parse_pdfxml_string(SAMPLE_PDFXML)

    assert len(doc.outlines) == 1
    top = doc.outlines[0]
    assert top.items == [OutlineItem(page=1, title="Chapter 1")]
    assert [i.title for i in top.children[0].items] == ["Section 1.1", "Section 1.2"]


def test_page_lookup_by_number():
    doc = parse_pdfxml_string(SAMPLE_PDFXML)

    assert doc.page(2).texts[0].text == "Other page"
    assert doc.page(3) is None


def test_wrong_root_element():
    with pytest.raises(PdfXmlParseError):
        parse_pdfxml_string("<html><body>nope</body></html>")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_pdfxml(str(tmp_path / "missing.xml"))
