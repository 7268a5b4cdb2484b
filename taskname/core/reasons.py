"""
Rejection reasons and the validation outcome type.

Every rejected name maps to exactly one ``Reason``.  The family is closed:
one frozen dataclass per rule, each carrying only the data that rule needs
and rendering its own human-readable message.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from taskname._config import MAX_NAME_LENGTH


class ReasonKind(str, Enum):
    """Stable machine-readable code for each rejection rule."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    INVALID_WHITESPACE = "invalid_whitespace"
    INVALID_LEADING_CHARACTER = "invalid_leading_character"
    INVALID_TRAILING_CHARACTER = "invalid_trailing_character"
    CONSECUTIVE_NAMESPACE_SEPARATORS = "consecutive_namespace_separators"
    LEADING_NAMESPACE_SEPARATOR = "leading_namespace_separator"
    TRAILING_NAMESPACE_SEPARATOR = "trailing_namespace_separator"
    INVALID_CHARACTER = "invalid_character"
    INVALID_NAMESPACE_PART_LEADING = "invalid_namespace_part_leading"
    INVALID_NAMESPACE_PART_TRAILING = "invalid_namespace_part_trailing"


class Reason:
    """Base of all rejection reasons."""

    kind: ClassVar[ReasonKind]

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Empty(Reason):
    kind: ClassVar[ReasonKind] = ReasonKind.EMPTY

    @property
    def message(self) -> str:
        return "Task name cannot be empty"


@dataclass(frozen=True)
class TooLong(Reason):
    length: int
    max: int = MAX_NAME_LENGTH
    kind: ClassVar[ReasonKind] = ReasonKind.TOO_LONG

    @property
    def message(self) -> str:
        return f"Task name is too long: {self.length} characters (maximum: {self.max})"


@dataclass(frozen=True)
class InvalidWhitespace(Reason):
    kind: ClassVar[ReasonKind] = ReasonKind.INVALID_WHITESPACE

    @property
    def message(self) -> str:
        return "Task name cannot have leading or trailing whitespace"


@dataclass(frozen=True)
class InvalidLeadingCharacter(Reason):
    character: str
    kind: ClassVar[ReasonKind] = ReasonKind.INVALID_LEADING_CHARACTER

    @property
    def message(self) -> str:
        return (f"Task name cannot start with '{self.character}' "
                "(hyphens and underscores not allowed at the start)")


@dataclass(frozen=True)
class InvalidTrailingCharacter(Reason):
    character: str
    kind: ClassVar[ReasonKind] = ReasonKind.INVALID_TRAILING_CHARACTER

    @property
    def message(self) -> str:
        return (f"Task name cannot end with '{self.character}' "
                "(hyphens and underscores not allowed at the end)")


@dataclass(frozen=True)
class ConsecutiveNamespaceSeparators(Reason):
    kind: ClassVar[ReasonKind] = ReasonKind.CONSECUTIVE_NAMESPACE_SEPARATORS

    @property
    def message(self) -> str:
        return "Task name cannot contain consecutive namespace separators (:::)"


@dataclass(frozen=True)
class LeadingNamespaceSeparator(Reason):
    kind: ClassVar[ReasonKind] = ReasonKind.LEADING_NAMESPACE_SEPARATOR

    @property
    def message(self) -> str:
        return "Task name cannot start with namespace separator (::)"


@dataclass(frozen=True)
class TrailingNamespaceSeparator(Reason):
    kind: ClassVar[ReasonKind] = ReasonKind.TRAILING_NAMESPACE_SEPARATOR

    @property
    def message(self) -> str:
        return "Task name cannot end with namespace separator (::)"


@dataclass(frozen=True)
class InvalidCharacter(Reason):
    character: str
    position: int
    kind: ClassVar[ReasonKind] = ReasonKind.INVALID_CHARACTER

    @property
    def message(self) -> str:
        return (f"Invalid character '{self.character}' at position {self.position} "
                "(only ASCII alphanumeric, hyphens, underscores, and '::' are allowed)")


@dataclass(frozen=True)
class InvalidNamespacePartLeading(Reason):
    part: str
    character: str
    kind: ClassVar[ReasonKind] = ReasonKind.INVALID_NAMESPACE_PART_LEADING

    @property
    def message(self) -> str:
        return (f"Namespace part '{self.part}' cannot start with '{self.character}' "
                "(hyphens and underscores not allowed at the start of a namespace part)")


@dataclass(frozen=True)
class InvalidNamespacePartTrailing(Reason):
    part: str
    character: str
    kind: ClassVar[ReasonKind] = ReasonKind.INVALID_NAMESPACE_PART_TRAILING

    @property
    def message(self) -> str:
        return (f"Namespace part '{self.part}' cannot end with '{self.character}' "
                "(hyphens and underscores not allowed at the end of a namespace part)")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one name: valid when ``reason`` is None.

    Truthiness follows ``is_ok()`` so callers can write
    ``if validate_name_detailed(name): ...``.
    """

    reason: Optional[Reason] = None

    @classmethod
    def invalid(cls, reason: Reason) -> "ValidationResult":
        return cls(reason=reason)

    def is_ok(self) -> bool:
        return self.reason is None

    def is_err(self) -> bool:
        return self.reason is not None

    def __bool__(self) -> bool:
        return self.is_ok()

    @property
    def message(self) -> Optional[str]:
        """Rendered reason, or None for a valid name."""
        return None if self.reason is None else self.reason.message

    def unwrap_err(self) -> Reason:
        if self.reason is None:
            raise ValueError("unwrap_err() called on a valid result")
        return self.reason


VALID = ValidationResult()


class TaskNameError(ValueError):
    """Raised by the exception-style helpers when a name is rejected."""

    def __init__(self, name: str, reason: Reason):
        super().__init__(reason.message)
        self.name = name
        self.reason = reason
