"""Validation contracts for caller-supplied values.

Every value that ends up in an argument vector passes exactly one of these
contracts first. Each contract is a pure function that returns a
:class:`ValidationOutcome`; callers either inspect the outcome or call
:meth:`ValidationOutcome.unwrap`, which raises :class:`ValidationRejection`.
Because ``ValidationRejection`` is a ``ValueError``, raising it inside a
pydantic ``field_validator`` produces a normal per-field ``ValidationError``.

Contracts:
- File / folder tokens: relative, no ``..`` segment, no null byte.
- Vault names: strict allow-list, must not look like a flag.
- Property names and types: allow-lists.
- Extensions: short allow-list, may be empty.
- Free text: length only. Shell metacharacters are fine because values are
  passed as literal argv entries and never reach a shell.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from obsidian_cli_mcp.constants import (
    MAX_EXTENSION_LENGTH,
    MAX_PATH_LENGTH,
    MAX_PROPERTY_NAME_LENGTH,
    MAX_PROPERTY_TYPE_LENGTH,
    MAX_VAULT_NAME_LENGTH,
)
from obsidian_cli_mcp.errors import ValidationRejection

# Leading "/", a ".." segment followed by a separator or end of string, or NUL.
# "..foo" is a legal filename and is not matched.
PATH_UNSAFE = re.compile(r"(?:\A/|\.\.(?:[\\/]|\Z)|\x00)")
# Allow-lists are applied with fullmatch.
VAULT_NAME_PATTERN = re.compile(r"[\w\s\-().]+")
PROPERTY_NAME_PATTERN = re.compile(r"[\w\-. ]+")
PROPERTY_TYPE_PATTERN = re.compile(r"[\w-]+")
EXTENSION_PATTERN = re.compile(r"[\w.]*")


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of applying a validation contract to one value."""

    accepted: bool
    value: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def accept(cls, value: str) -> ValidationOutcome:
        return cls(accepted=True, value=value)

    @classmethod
    def reject(cls, reason: str) -> ValidationOutcome:
        return cls(accepted=False, reason=reason)

    def unwrap(self) -> str:
        """Return the accepted value or raise :class:`ValidationRejection`."""
        if not self.accepted:
            raise ValidationRejection(self.reason or "Value rejected")
        return self.value  # type: ignore[return-value]


def _check_length(
    value: str, label: str, max_length: int, min_length: int = 1
) -> Optional[ValidationOutcome]:
    if len(value) < min_length:
        if min_length == 1:
            return ValidationOutcome.reject(f"{label} cannot be empty.")
        return ValidationOutcome.reject(
            f"{label} must be at least {min_length} characters long."
        )
    if len(value) > max_length:
        return ValidationOutcome.reject(
            f"{label} must be at most {max_length} characters long (got {len(value)})."
        )
    return None


def is_path_safe(value: str) -> bool:
    """Return True when ``value`` is relative, traversal-free and contains no NUL."""
    return PATH_UNSAFE.search(value) is None


def validate_file_token(value: str, label: str = "File path") -> ValidationOutcome:
    """Validate a vault-relative file path.

    Spaces, parentheses and shell metacharacters are accepted.

    Examples:
        >>> validate_file_token("note (copy).md").accepted
        True
        >>> validate_file_token("../../../etc/passwd").accepted
        False
    """
    rejected = _check_length(value, label, MAX_PATH_LENGTH)
    if rejected:
        return rejected
    if not is_path_safe(value):
        return ValidationOutcome.reject(
            f"{label} must not contain '..' traversal, absolute paths, or null bytes."
        )
    return ValidationOutcome.accept(value)


def validate_folder_token(value: str) -> ValidationOutcome:
    """Validate a vault-relative folder path (same rules as file paths)."""
    return validate_file_token(value, label="Folder path")


def validate_vault_name(value: str) -> ValidationOutcome:
    """Validate a vault name passed as ``--vault=<name>``.

    The allow-list is the injection boundary for this field, and a leading
    dash is rejected so the name cannot be read as another flag.
    """
    rejected = _check_length(value, "Vault name", MAX_VAULT_NAME_LENGTH)
    if rejected:
        return rejected
    if not VAULT_NAME_PATTERN.fullmatch(value):
        return ValidationOutcome.reject(
            "Vault name may only contain letters, numbers, spaces, hyphens, "
            "underscores, parentheses, and dots."
        )
    if value.startswith("-"):
        return ValidationOutcome.reject("Vault name must not start with a dash.")
    return ValidationOutcome.accept(value)


def validate_property_name(value: str) -> ValidationOutcome:
    """Validate a frontmatter property name."""
    rejected = _check_length(value, "Property name", MAX_PROPERTY_NAME_LENGTH)
    if rejected:
        return rejected
    if not PROPERTY_NAME_PATTERN.fullmatch(value):
        return ValidationOutcome.reject(
            "Property name may only contain letters, numbers, underscores, "
            "hyphens, dots, and spaces."
        )
    return ValidationOutcome.accept(value)


def validate_property_type(value: str) -> ValidationOutcome:
    """Validate a property type such as ``text``, ``date`` or ``checkbox``."""
    rejected = _check_length(value, "Property type", MAX_PROPERTY_TYPE_LENGTH)
    if rejected:
        return rejected
    if not PROPERTY_TYPE_PATTERN.fullmatch(value):
        return ValidationOutcome.reject(
            "Property type may only contain letters, numbers, underscores, and hyphens."
        )
    return ValidationOutcome.accept(value)


def validate_extension(value: str) -> ValidationOutcome:
    """Validate a file extension filter. Empty means no filter."""
    rejected = _check_length(value, "Extension", MAX_EXTENSION_LENGTH, min_length=0)
    if rejected:
        return rejected
    if not EXTENSION_PATTERN.fullmatch(value):
        return ValidationOutcome.reject(
            "Extension may only contain letters, numbers, underscores, and dots."
        )
    return ValidationOutcome.accept(value)


def validate_text(
    value: str, label: str, max_length: int, min_length: int = 0
) -> ValidationOutcome:
    """Validate free text by length only."""
    rejected = _check_length(value, label, max_length, min_length=min_length)
    if rejected:
        return rejected
    return ValidationOutcome.accept(value)
