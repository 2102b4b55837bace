"""Data models for configuration validation results and errors."""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class ErrorCode(Enum):
    """Error codes for configuration validation issues."""
    MISSING_SECTION = "missing_section"
    INVALID_VALUE = "invalid_value"


@dataclass
class ValidationError:
    """Represents a configuration validation error."""
    section: str
    key: Optional[str]
    message: str
    suggestion: Optional[str]
    error_code: ErrorCode

    def __str__(self) -> str:
        location = f"[{self.section}]"
        if self.key:
            location += f".{self.key}"

        result = f"{location}: {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Ensure is_valid reflects the presence of errors."""
        self.is_valid = len(self.errors) == 0

    def add_error(self, error: ValidationError) -> None:
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)
