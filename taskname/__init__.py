"""taskname: task name validation for build-automation tools."""
from importlib.metadata import version, PackageNotFoundError

from ._config import MAX_NAME_LENGTH, NAMESPACE_SEPARATOR
from .core.reasons import (
    Reason, ReasonKind, ValidationResult, VALID, TaskNameError,
    Empty, TooLong, InvalidWhitespace,
    InvalidLeadingCharacter, InvalidTrailingCharacter,
    ConsecutiveNamespaceSeparators, LeadingNamespaceSeparator,
    TrailingNamespaceSeparator, InvalidCharacter,
    InvalidNamespacePartLeading, InvalidNamespacePartTrailing,
)
from .core.validator import (
    validate_name, validate_name_detailed, ensure_valid_name, split_namespace,
)

try:
    __version__ = version("taskname")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "MAX_NAME_LENGTH", "NAMESPACE_SEPARATOR",
    "validate_name", "validate_name_detailed", "ensure_valid_name", "split_namespace",
    "Reason", "ReasonKind", "ValidationResult", "VALID", "TaskNameError",
    "Empty", "TooLong", "InvalidWhitespace",
    "InvalidLeadingCharacter", "InvalidTrailingCharacter",
    "ConsecutiveNamespaceSeparators", "LeadingNamespaceSeparator",
    "TrailingNamespaceSeparator", "InvalidCharacter",
    "InvalidNamespacePartLeading", "InvalidNamespacePartTrailing",
]
