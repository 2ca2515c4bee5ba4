"""Field name conversion and template substitution."""

from tinystr.text.naming import convert
from tinystr.text.template import fill

__all__ = ["convert", "fill"]
