"""Request field validation raising structured ValidationErrors."""

import re

from docshelf.core.constants import HEX_COLOR_PATTERN, ErrorMessages
from docshelf.core.exceptions import ValidationException

_hex_color_re = re.compile(HEX_COLOR_PATTERN)


def validate_length(
    value: str | None,
    field: str,
    min_length: int | None = None,
    max_length: int | None = None,
    nullable: bool = False,
) -> str | None:
    """
    Strip a string field and check its length.

    When nullable, a missing or blank value is accepted and returned as-is
    (stripped), meaning "not provided".
    """
    if value is not None:
        value = value.strip()
    if nullable and not value:
        return value
    if value is None:
        raise ValidationException(field, ErrorMessages.FIELD_REQUIRED.format(field))
    if min_length is not None and len(value) < min_length:
        raise ValidationException(field, ErrorMessages.FIELD_TOO_SHORT.format(field, min_length))
    if max_length is not None and len(value) > max_length:
        raise ValidationException(field, ErrorMessages.FIELD_TOO_LONG.format(field, max_length))
    return value


def validate_hex_color(value: str | None, field: str, nullable: bool = False) -> str | None:
    """Check that a field is a "#rrggbb" color code"""
    if nullable and not value:
        return value
    if value is None or not _hex_color_re.fullmatch(value):
        raise ValidationException(field, ErrorMessages.FIELD_NOT_HEX_COLOR.format(field))
    return value
