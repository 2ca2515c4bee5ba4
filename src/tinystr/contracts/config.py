"""Render configuration models attached to types and fields."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Layout(str, Enum):
    """How fields are joined."""

    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"


class NamingFormat(str, Enum):
    """Transformation applied to a field name before display."""

    PASCAL = "pascal"  # as declared
    CAMEL = "camel"
    SNAKE = "snake"
    KEBAB = "kebab"
    HUMAN = "human"


class RenderConfig(BaseModel):
    """Type-level settings controlling the header, layout and field rendering.

    Only the fields passed at construction count as set by the type
    (``model_fields_set``); everything else is inherited from the defaults
    the type is rendered with.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    layout: Layout = Layout.SINGLE_LINE
    show_type_name: bool = True
    emoji: str | None = None
    header_separator: str = ". "
    field_separator: str = ", "
    collection_separator: str = "; "
    decimal_places: int = Field(default=5, ge=0)
    naming_format: NamingFormat = NamingFormat.PASCAL
    field_template: str = "{k}: {v}"


class FieldConfig(BaseModel):
    """Field-level overrides. ``None`` means inherit from the type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    template: str | None = None
    collection_separator: str | None = None
    decimal_places: int | None = Field(default=None, ge=0)
    naming_format: NamingFormat | None = None
    ignored: bool = False


IGNORE = FieldConfig(ignored=True)
