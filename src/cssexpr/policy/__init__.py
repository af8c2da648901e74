"""Field policies: how numeric inputs check, commit and switch units."""

from cssexpr.policy.fields import (
    FIELDS,
    FONT_SIZE,
    LETTER_SPACING,
    LINE_HEIGHT,
    FieldSpec,
    check,
    commit,
    get_field,
    switch_unit,
)

__all__ = [
    "FIELDS",
    "FONT_SIZE",
    "LETTER_SPACING",
    "LINE_HEIGHT",
    "FieldSpec",
    "check",
    "commit",
    "get_field",
    "switch_unit",
]
