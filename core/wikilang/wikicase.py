from __future__ import annotations

import re

_UPPER_RE = re.compile(r"[A-Z]")
_SPACE_RE = re.compile(r"[ \t\n\v\f\r]+")


def wiki_case(title: str) -> str:
    """Convert a PascalCase title into space-separated words.

        wiki_case("PascalCase") == "Pascal Case"

    Text that is already spaced is left unchanged.
    """

    spaced = _UPPER_RE.sub(lambda m: " " + m.group(0), title).strip(" ")
    return _SPACE_RE.sub(" ", spaced)
