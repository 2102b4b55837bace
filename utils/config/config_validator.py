"""Configuration validation for the [digest] section."""

import math
import logging
from typing import Any, Dict

from services.hashing_errors import InvalidEncodingError
from utils.encoding_selector import parse_encoding
from .validation_models import ValidationResult, ValidationError, ErrorCode

logger = logging.getLogger(__name__)


def encoding_selector_from_text(raw: str) -> Any:
    """Config and CLI values are text; ASCII-digit selectors are ordinals."""
    text = raw.strip()
    return int(text) if text.isascii() and text.isdecimal() else text


class ConfigValidator:
    """Validates digestkit configuration for completeness and correctness."""

    SECTION = 'digest'

    ERROR_MESSAGES = {
        ErrorCode.MISSING_SECTION: "No [{section}] section; using built-in defaults.",
        ErrorCode.INVALID_VALUE: "Invalid value '{value}' for {section}.{key}. {details}",
    }

    def validate_digest_config(self, config: Dict[str, Dict[str, Any]]) -> ValidationResult:
        """
        Validate the [digest] section of a normalized configuration.

        Args:
            config: Normalized configuration dict

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult()
        section = (config or {}).get(self.SECTION)

        if section is None:
            result.add_warning(self.ERROR_MESSAGES[ErrorCode.MISSING_SECTION].format(section=self.SECTION))
            return result

        encoding = section.get('default_encoding')
        if encoding is not None and str(encoding).strip():
            try:
                parse_encoding(encoding_selector_from_text(str(encoding)))
            except InvalidEncodingError as e:
                result.add_error(ValidationError(
                    section=self.SECTION,
                    key='default_encoding',
                    message=self.ERROR_MESSAGES[ErrorCode.INVALID_VALUE].format(
                        value=encoding, section=self.SECTION, key='default_encoding', details=str(e)
                    ),
                    suggestion="Use one of: utf8, base64, hex (or 0, 1, 2)",
                    error_code=ErrorCode.INVALID_VALUE,
                ))

        timeout = section.get('lock_timeout')
        if timeout is not None and str(timeout).strip():
            try:
                value = float(timeout)
                if not math.isfinite(value) or value <= 0:
                    raise ValueError("must be a positive number of seconds")
            except ValueError as e:
                result.add_error(ValidationError(
                    section=self.SECTION,
                    key='lock_timeout',
                    message=self.ERROR_MESSAGES[ErrorCode.INVALID_VALUE].format(
                        value=timeout, section=self.SECTION, key='lock_timeout', details=str(e)
                    ),
                    suggestion="Use a positive number of seconds, or leave empty to wait indefinitely",
                    error_code=ErrorCode.INVALID_VALUE,
                ))

        for key in section:
            if key not in ('default_encoding', 'lock_timeout'):
                result.add_warning(f"Unknown key '{key}' in [{self.SECTION}] is ignored")

        logger.debug(f"Digest config validation finished: {len(result.errors)} errors, {len(result.warnings)} warnings")
        return result
