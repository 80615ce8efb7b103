"""Custom exceptions used throughout the encoder package."""

from typing import Any, Optional


class SvdEncoderError(Exception):
    """Base exception for all encoder errors.

    All package-specific exceptions should inherit from this class.
    This allows catching all encoder errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(SvdEncoderError):
    """Raised when there's an error in the encoder configuration.

    This includes:
    - Unreadable or malformed configuration file
    - Unknown configuration key or value
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class EncodeError(SvdEncoderError):
    """Raised when an entity cannot be encoded into a tree node.

    This is the single failure kind of the encode path. Nested encoders
    raise it (or a subclass) and callers propagate it unchanged; no
    partially built node is ever returned.
    """

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if entity is not None:
            details = details or {}
            details["entity"] = entity

        super().__init__(message=message, details=details)
        self.entity = entity


class NumberFormatError(EncodeError):
    """Raised when a value cannot be rendered by a number format.

    Examples:
    - Negative value for an unsigned SVD number
    - Non-integer value
    """

    def __init__(
        self,
        value: Any,
        number_format: str,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"Cannot format {value!r} as {number_format}"
        super().__init__(message=message, details=details)
        self.value = value
        self.number_format = number_format


class InvalidEntityError(EncodeError):
    """Raised when a description entity is internally inconsistent.

    Examples:
    - Enumerated value with neither a value nor isDefault
    - Write constraint range with minimum above maximum
    - Bit range of zero width
    """

    def __init__(
        self,
        entity: str,
        reason: str,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"Invalid {entity}: {reason}"
        super().__init__(message=message, entity=entity, details=details)
        self.reason = reason


class UnsupportedEntityError(EncodeError):
    """Raised when no encoder is registered for an entity type."""

    def __init__(self, entity_type: type, details: Optional[dict[str, Any]] = None):
        message = f"No encoder registered for {entity_type.__name__}"
        super().__init__(message=message, entity=entity_type.__name__, details=details)
        self.entity_type = entity_type
