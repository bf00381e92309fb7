"""Shared fixtures: small pdf2xml documents and fragment builders."""

from __future__ import annotations

from pathlib import Path

import pytest

from pdfxml_table_extractor import TextFragment

SAMPLE_PDFXML = """<?xml version="1.0" encoding="UTF-8"?>
<pdf2xml producer="poppler" version="22.02.0">
<page number="1" position="absolute" top="0" left="0" height="1263" width="892">
    <fontspec id="0" size="12" family="Times" color="#000000"/>
    <fontspec id="1" size="10" family="Helvetica" color="#333333"/>
<text top="40" left="50" width="300" height="18" font="0">Report title</text>
<text top="100" left="50" width="40" height="15" font="0"><b>Name</b></text>
<text top="100" left="200" width="40" height="15" font="0"><b>Value</b></text>
<text top="120" left="52" width="40" height="15" font="1">Alpha</text>
<text top="121" left="201" width="20" height="15" font="1">1</text>
<text top="140" left="51" width="40" height="15" font="1">Beta</text>
<text top="140" left="420" width="40" height="15" font="1">stray</text>
<text top="160" left="199" width="20" height="15" font="1">3</text>
<text left="10" width="20" height="15" font="1">broken</text>
<text top="900" left="50" width="300" height="15" font="1">Page footer</text>
</page>
<page number="2" position="absolute" top="0" left="0" height="1263" width="892">
<text top="100" left="50" width="40" height="15">Other page</text>
</page>
<outline>
<item page="1">Chapter 1</item>
<outline>
<item page="1">Section 1.1</item>
<item page="2">Section 1.2</item>
</outline>
</outline>
</pdf2xml>
"""


def frag(top: int, left: int, text: str = "", bold: str | None = None) -> TextFragment:
    return TextFragment(top=top, left=left, width=10, height=10, text=text, bold_text=bold)


@pytest.fixture
def sample_xml_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.xml"
    path.write_text(SAMPLE_PDFXML, encoding="utf-8")
    return path
