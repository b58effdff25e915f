"""Composite identifier encoding and validation helpers."""
from __future__ import annotations
from typing import Any

ID_SEPARATOR = "|"


class InvalidIDError(ValueError):
    """Identifier does not contain the separator."""


class EmptyFieldError(ValueError):
    """One half of a composite identifier is empty."""


def as_id_part(value: Any) -> str:
    """Render a field value as an identifier segment."""
    if value is None:
        return ""
    return str(value)


def require_pair_values(left: str, right: str, left_name: str, right_name: str) -> None:
    """Validate both halves of a pair.

    The right half is checked first, so an entirely empty pair reports the
    right field.

    Raises:
        EmptyFieldError: If either half is empty
    """
    if not right:
        raise EmptyFieldError(f"{right_name} cannot be empty")
    if not left:
        raise EmptyFieldError(f"{left_name} cannot be empty")


def split_pair_id(raw: str, left_name: str, right_name: str) -> tuple[str, str]:
    """Split a composite identifier on its first separator.

    Args:
        raw: Identifier such as ``"group|member"``
        left_name: Field name used in error messages for the left half
        right_name: Field name used in error messages for the right half

    Returns:
        ``(left, right)``; the right half may itself contain separators

    Raises:
        InvalidIDError: If there is no separator
        EmptyFieldError: If either half is empty
    """
    left, sep, right = raw.partition(ID_SEPARATOR)
    if not sep:
        raise InvalidIDError(f"Invalid ID: {raw}")
    require_pair_values(left, right, left_name, right_name)
    return left, right


def join_pair_id(left: str, right: str) -> str:
    """Encode two values as a composite identifier."""
    return f"{left}{ID_SEPARATOR}{right}"
