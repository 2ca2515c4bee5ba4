"""Field name case conversion."""

from __future__ import annotations

from tinystr.contracts.config import NamingFormat

# Characters already acting as word boundaries in a declared name
_BOUNDARIES = frozenset("_- ")

_SEPARATORS = {
    NamingFormat.SNAKE: "_",
    NamingFormat.KEBAB: "-",
    NamingFormat.HUMAN: " ",
}


def convert(name: str, fmt: NamingFormat) -> str:
    """Convert *name* to the casing described by *fmt*.

    PASCAL returns the name as declared. CAMEL lowercases the first character.
    SNAKE and KEBAB insert their separator before each uppercase character
    (except the first) and lowercase the result; HUMAN inserts a space and
    keeps the case. Existing ``_``, ``-`` and space characters are treated as
    word boundaries and rewritten to the target separator.
    """
    if not name:
        return name
    if fmt is NamingFormat.PASCAL:
        return name
    if fmt is NamingFormat.CAMEL:
        return name[0].lower() + name[1:]

    sep = _SEPARATORS[fmt]
    words = _join_words(name, sep)
    if fmt is NamingFormat.HUMAN:
        return words
    return words.lower()


def _join_words(name: str, sep: str) -> str:
    out: list[str] = []
    for i, ch in enumerate(name):
        if ch in _BOUNDARIES:
            if out and out[-1] == sep:
                continue
            out.append(sep)
            continue
        if ch.isupper() and i > 0 and out[-1] != sep:
            out.append(sep)
        out.append(ch)
    return "".join(out)
