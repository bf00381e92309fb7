from __future__ import annotations
from typing import Iterable, List
from .structures import TextFragment

def select_fragments(fragments: Iterable[TextFragment],
                     from_top: int,
                     to_top: int
                     ) -> List[TextFragment]:
    """Filter fragments to the band from_top <= top <= to_top and sort them
    top-to-bottom, then left-to-right.

    The sort is stable, so fragments with equal (top, left) keep their
    original relative order. Returns a new list; the input is not touched.
    """
    band = [f for f in fragments if from_top <= f.top <= to_top]
    return sorted(band, key=lambda f: (f.top, f.left))
