"""Field template substitution."""

from __future__ import annotations

import re

_PLACEHOLDER = re.compile(r"\{([kv])\}")


def fill(template: str, key: str, value: str) -> str:
    """Replace every ``{k}`` with *key* and every ``{v}`` with *value*.

    Substitution happens in a single pass, so a value that itself contains
    ``{k}`` or ``{v}`` is left as-is. Any other braces are literal text.
    """
    return _PLACEHOLDER.sub(lambda m: key if m.group(1) == "k" else value, template)
