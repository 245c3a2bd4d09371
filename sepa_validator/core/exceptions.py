"""
SEPA Validator - Custom Exceptions

This module defines the exception taxonomy used by the validation pipeline.
Every exception collapses to an invalid ValidationResult at the engine
boundary; the error code keeps them distinguishable for tests and logs.
"""

from typing import Any, Dict, List, Optional


class SepaValidatorException(Exception):
    """Base exception for all SEPA validator errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "SEPA_VALIDATOR_ERROR"
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (Code: {self.error_code}, Context: {self.context})"
        return f"{self.message} (Code: {self.error_code})"


class ConfigurationException(SepaValidatorException):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(
            message,
            error_code="CONFIG_ERROR",
            context={"config_key": config_key} if config_key else {},
        )


class XmlParseException(SepaValidatorException):
    """Raised when the input text is not well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        context = {}
        if line is not None:
            context["line"] = line
        if column is not None:
            context["column"] = column

        super().__init__(message, error_code="XML_PARSE_ERROR", context=context)


class NotSepaException(SepaValidatorException):
    """Raised when the document is XML but not a SEPA initiation message."""

    def __init__(self, message: str, namespace: Optional[str] = None):
        super().__init__(
            message,
            error_code="NOT_SEPA",
            context={"namespace": namespace} if namespace else {},
        )


class StructuralException(SepaValidatorException):
    """Raised when required elements are missing. Carries every violation."""

    def __init__(self, errors: List[str]):
        super().__init__(
            "\n".join(errors),
            error_code="STRUCTURE_ERROR",
            context={"error_count": len(errors)},
        )
        self.errors = list(errors)


class SchemaLoadException(SepaValidatorException):
    """Raised when an XSD document cannot be retrieved."""

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        context: Dict[str, Any] = {}
        if url:
            context["url"] = url
        if status is not None:
            context["status"] = status

        super().__init__(message, error_code="SCHEMA_LOAD_ERROR", context=context)


class SchemaValidationException(SepaValidatorException):
    """Raised when the XSD validation capability cannot run."""

    def __init__(self, message: str):
        super().__init__(message, error_code="SCHEMA_VALIDATION_ERROR")
