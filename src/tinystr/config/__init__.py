"""Loading default render settings from YAML files."""

from tinystr.config.loader import CONFIG_FILENAME, load_defaults, load_defaults_from_dir

__all__ = ["CONFIG_FILENAME", "load_defaults", "load_defaults_from_dir"]
