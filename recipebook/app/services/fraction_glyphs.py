"""Unicode vulgar fraction glyphs and their ASCII spellings."""

import re
from typing import Dict

GLYPH_TO_FRACTION: Dict[str, str] = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅐": "1/7",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
    "⅑": "1/9",
    "⅒": "1/10",
}

FRACTION_TO_GLYPH: Dict[str, str] = {v: k for k, v in GLYPH_TO_FRACTION.items()}

FRACTION_CHARS = "".join(GLYPH_TO_FRACTION.keys())

_GLYPH_RE = re.compile(rf"([0-9]?)([{FRACTION_CHARS}])")
_FRACTION_TOKEN_RE = re.compile(r"(?<![0-9/])([0-9]+/[0-9]+)(?![0-9/])")


def expand_glyphs(text: str) -> str:
    """Replace glyphs with ASCII fractions, e.g. "1½" -> "1 1/2"."""

    def _sub(match: re.Match) -> str:
        digit, glyph = match.groups()
        fraction = GLYPH_TO_FRACTION[glyph]
        return f"{digit} {fraction}" if digit else fraction

    return _GLYPH_RE.sub(_sub, text)


def collapse_to_glyphs(text: str) -> str:
    """Replace standalone ``n/d`` tokens that have a glyph, e.g. "1 1/4" -> "1 ¼"."""
    return _FRACTION_TOKEN_RE.sub(lambda m: FRACTION_TO_GLYPH.get(m.group(1), m.group(1)), text)
