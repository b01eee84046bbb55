"""Example extraction: pulls the ``<pre><code>`` blocks out of a puzzle page."""

from __future__ import annotations

from typing import List

import soupsieve
from bs4 import BeautifulSoup

# Example inputs are rendered as <pre><code>; inline <code> elsewhere in the
# prose must not match.  Compiled at import so a bad pattern fails loudly once.
_FIXTURE_SELECTOR = soupsieve.compile("pre > code")


def parse_tests(html: str) -> List[str]:
    """Return the text of every ``code`` element whose parent is a ``pre``.

    Results are in document order.  Text nodes inside a block (including
    those nested in ``<em>`` and friends) are joined with no separator.
    A page without examples yields an empty list.
    """
    soup = BeautifulSoup(html, "html5lib")
    return [el.get_text() for el in _FIXTURE_SELECTOR.select(soup)]
