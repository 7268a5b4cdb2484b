"""
Task name validation.

A valid task name:
- is not empty and has at most ``MAX_NAME_LENGTH`` characters
- has no leading or trailing whitespace, as defined by ``str.strip()``
  (this includes the ASCII separators U+001C to U+001F)
- neither starts nor ends with a hyphen or underscore
- uses ``::`` as namespace separator, never doubled up (``:::``),
  never at the start or the end
- contains only ASCII alphanumerics, ``-`` and ``_`` in each namespace part,
  and no part starts or ends with ``-`` or ``_``

Checks run in a fixed order and the first failing one decides the reason.
"""
from typing import List

from taskname._config import (
    MAX_NAME_LENGTH, NAMESPACE_SEPARATOR, CONSECUTIVE_SEPARATORS,
    EDGE_CHARS, ALLOWED_CHARS,
)
from taskname.core.reasons import (
    VALID, ValidationResult, TaskNameError,
    Empty, TooLong, InvalidWhitespace,
    InvalidLeadingCharacter, InvalidTrailingCharacter,
    ConsecutiveNamespaceSeparators, LeadingNamespaceSeparator,
    TrailingNamespaceSeparator, InvalidCharacter,
    InvalidNamespacePartLeading, InvalidNamespacePartTrailing,
)
from taskname.utils import get_logger

logger = get_logger(__name__)

_SEP_LEN = len(NAMESPACE_SEPARATOR)


def validate_name_detailed(name: str) -> ValidationResult:
    """Validate *name* and return ``VALID`` or the first violated rule."""
    if not name:
        return ValidationResult.invalid(Empty())

    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult.invalid(TooLong(length=len(name), max=MAX_NAME_LENGTH))

    if name != name.strip():
        return ValidationResult.invalid(InvalidWhitespace())

    if name[0] in EDGE_CHARS:
        return ValidationResult.invalid(InvalidLeadingCharacter(character=name[0]))
    if name[-1] in EDGE_CHARS:
        return ValidationResult.invalid(InvalidTrailingCharacter(character=name[-1]))

    if CONSECUTIVE_SEPARATORS in name:
        return ValidationResult.invalid(ConsecutiveNamespaceSeparators())
    if name.startswith(NAMESPACE_SEPARATOR):
        return ValidationResult.invalid(LeadingNamespaceSeparator())
    if name.endswith(NAMESPACE_SEPARATOR):
        return ValidationResult.invalid(TrailingNamespaceSeparator())

    offset = 0  # index of the current part inside the full name
    for part in name.split(NAMESPACE_SEPARATOR):
        # unreachable after the separator checks above
        if not part:
            return ValidationResult.invalid(ConsecutiveNamespaceSeparators())

        for i, ch in enumerate(part):
            if ch not in ALLOWED_CHARS:
                return ValidationResult.invalid(
                    InvalidCharacter(character=ch, position=offset + i))

        if part[0] in EDGE_CHARS:
            return ValidationResult.invalid(
                InvalidNamespacePartLeading(part=part, character=part[0]))
        if part[-1] in EDGE_CHARS:
            return ValidationResult.invalid(
                InvalidNamespacePartTrailing(part=part, character=part[-1]))

        offset += len(part) + _SEP_LEN

    return VALID


def validate_name(name: str) -> bool:
    """Return True if *name* is a valid task name."""
    return validate_name_detailed(name).is_ok()


def ensure_valid_name(name: str) -> str:
    """Return *name* unchanged, or raise ``TaskNameError`` if it is invalid."""
    result = validate_name_detailed(name)
    if not result:
        logger.debug("Rejected task name %r: %s", name, result.message)
        raise TaskNameError(name, result.reason)
    return name


def split_namespace(name: str) -> List[str]:
    """Split a valid task name into its namespace parts.

    ``"ns1::ns2::task"`` -> ``["ns1", "ns2", "task"]``.
    Raises ``TaskNameError`` if *name* is invalid.
    """
    return ensure_valid_name(name).split(NAMESPACE_SEPARATOR)
