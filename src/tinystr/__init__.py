"""tinystr: declarative object-to-string formatting."""

from tinystr.contracts import (
    IGNORE,
    ConfigLoadError,
    CycleDetectedError,
    FieldConfig,
    Layout,
    NamingFormat,
    RenderConfig,
    StringifyError,
)
from tinystr.config import load_defaults, load_defaults_from_dir
from tinystr.engine import DisplayNamed, Stringifier, renderable, stringify

__version__ = "0.3.0"

__all__ = [
    "ConfigLoadError",
    "CycleDetectedError",
    "DisplayNamed",
    "FieldConfig",
    "IGNORE",
    "Layout",
    "NamingFormat",
    "RenderConfig",
    "Stringifier",
    "StringifyError",
    "__version__",
    "load_defaults",
    "load_defaults_from_dir",
    "renderable",
    "stringify",
]
