"""
Base Validator Framework

Result type and abstract validator shared by the SEPA validation pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from sepa_validator.core.exceptions import SepaValidatorException
from sepa_validator.extraction.summary import SepaSummary
from sepa_validator.sepa_codes import MessageKind


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of one validation call.

    Externally this is either valid (message + details) or invalid (message
    only). ``error_code`` and ``errors`` keep the failure category and the
    individual messages apart for callers that need them.
    """

    is_valid: bool
    message: str
    details: Optional[SepaSummary] = None
    kind: MessageKind = MessageKind.UNRECOGNIZED
    error_code: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    validated_at: datetime = field(default_factory=datetime.now)
    validator_name: str = ""
    validator_version: str = "1.0"

    def __post_init__(self):
        if not self.is_valid and self.details is not None:
            raise ValueError("An invalid result cannot carry details")
        if self.is_valid and self.details is None:
            raise ValueError("A valid result must carry details")

    @classmethod
    def valid(cls, message: str, details: SepaSummary, kind: MessageKind, **kwargs) -> "ValidationResult":
        return cls(is_valid=True, message=message, details=details, kind=kind, **kwargs)

    @classmethod
    def invalid(
        cls,
        message: str,
        error_code: str,
        errors: Optional[List[str]] = None,
        kind: MessageKind = MessageKind.UNRECOGNIZED,
        **kwargs,
    ) -> "ValidationResult":
        return cls(
            is_valid=False,
            message=message,
            kind=kind,
            error_code=error_code,
            errors=list(errors) if errors is not None else [message],
            **kwargs,
        )

    @classmethod
    def from_exception(
        cls,
        exc: SepaValidatorException,
        kind: MessageKind = MessageKind.UNRECOGNIZED,
        **kwargs,
    ) -> "ValidationResult":
        """Collapse a pipeline exception into an invalid result."""
        errors = getattr(exc, "errors", None) or [exc.message]
        return cls.invalid(exc.message, exc.error_code, errors=errors, kind=kind, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data: Dict[str, Any] = {
            "valid": self.is_valid,
            "message": self.message,
            "kind": self.kind.code,
            "validated_at": self.validated_at.isoformat(),
            "validator_name": self.validator_name,
            "validator_version": self.validator_version,
        }
        if self.is_valid:
            data["details"] = self.details.to_dict()
        else:
            data["error_code"] = self.error_code
            data["errors"] = list(self.errors)
        return data


class BaseValidator(ABC):
    """
    Abstract base class for document validators.

    Subclasses stamp every result with their name and version through
    ``_valid`` and ``_invalid``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return validator name."""
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        """Return validator version."""
        pass

    @abstractmethod
    def validate(self, data: Any) -> ValidationResult:
        """
        Validate the provided data.

        Args:
            data: Data to validate (type depends on validator)

        Returns:
            ValidationResult
        """
        pass

    def _valid(self, message: str, details: SepaSummary, kind: MessageKind) -> ValidationResult:
        return ValidationResult.valid(
            message,
            details,
            kind,
            validator_name=self.name,
            validator_version=self.version,
        )

    def _invalid(
        self,
        message: str,
        error_code: str,
        errors: Optional[List[str]] = None,
        kind: MessageKind = MessageKind.UNRECOGNIZED,
    ) -> ValidationResult:
        return ValidationResult.invalid(
            message,
            error_code,
            errors=errors,
            kind=kind,
            validator_name=self.name,
            validator_version=self.version,
        )

    def _from_exception(
        self,
        exc: SepaValidatorException,
        kind: MessageKind = MessageKind.UNRECOGNIZED,
    ) -> ValidationResult:
        return ValidationResult.from_exception(
            exc,
            kind=kind,
            validator_name=self.name,
            validator_version=self.version,
        )
