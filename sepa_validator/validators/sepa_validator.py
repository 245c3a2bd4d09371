"""
SEPA Message Validator

Validation pipeline for SEPA payment-initiation documents:
- Parsing and malformed-XML detection
- Credit transfer / direct debit classification
- Required-element structural checks
- Summary extraction
- Optional XSD validation through injected capabilities
"""

import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from prometheus_client import Counter, Histogram

from sepa_validator.core.config import Config, get_config
from sepa_validator.core.exceptions import (
    SepaValidatorException,
    StructuralException,
)
from sepa_validator.extraction.extractor import extract
from sepa_validator.parsing.classifier import classify
from sepa_validator.parsing.xml_tree import parse_xml
from sepa_validator.schema.cache import SchemaCache, SchemaLoader
from sepa_validator.schema.http import HttpSchemaFetcher
from sepa_validator.sepa_codes import MessageKind
from sepa_validator.validators.base_validator import BaseValidator, ValidationResult
from sepa_validator.validators.structure import validate_structure

logger = logging.getLogger(__name__)

VALIDATION_COUNTER = Counter(
    "sepa_validations_total",
    "SEPA document validations",
    ["kind", "outcome"],
)

VALIDATION_DURATION = Histogram(
    "sepa_validation_duration_seconds",
    "Time spent validating a SEPA document",
)

SCHEMA_ERRORS_HEADER = "XSD validation errors:"
SCHEMA_FAILURE_PREFIX = "XSD validation error: "
UNEXPECTED_FAILURE_PREFIX = "Error during validation: "

SchemaValidatorFn = Callable[[str, str], Union[List[str], Awaitable[List[str]]]]


class SepaValidator(BaseValidator):
    """
    Validator for SEPA credit transfer (pain.001) and direct debit (pain.008)
    initiation documents.

    ``validate`` runs the synchronous stages and never raises.
    ``validate_with_schema`` additionally runs the XSD stage when a schema
    validation capability is configured.
    """

    def __init__(
        self,
        schema_validator: Optional[SchemaValidatorFn] = None,
        schema_loader: Optional[SchemaLoader] = None,
        schema_urls: Optional[Dict[MessageKind, str]] = None,
        config: Optional[Config] = None,
    ):
        """
        Initialize the SEPA validator.

        Args:
            schema_validator: Callable taking (xml_text, schema_text) and
                returning a list of error strings, sync or awaitable. The
                XSD stage is skipped when None.
            schema_loader: Loader used to retrieve schema text. Defaults to
                an HTTP loader with a private cache.
            schema_urls: Kind to schema URL table, overriding configuration
            config: Configuration, defaults to the global one
        """
        self.config = config or get_config()
        self.schema_validator = schema_validator
        self.schema_urls = dict(schema_urls) if schema_urls else self.config.schema.as_url_map()

        if schema_loader is None and schema_validator is not None:
            schema_loader = SchemaLoader(
                HttpSchemaFetcher(timeout=self.config.schema.fetch_timeout),
                SchemaCache(),
            )
        self.schema_loader = schema_loader

    @property
    def name(self) -> str:
        return "SepaValidator"

    @property
    def version(self) -> str:
        return "1.0"

    def validate(self, data: Any) -> ValidationResult:
        """
        Run parsing, classification, structural validation and extraction.

        Args:
            data: XML text, already decoded

        Returns:
            ValidationResult; invalid results never carry details
        """
        start = time.time()
        result = self._validate_document(data)
        self._record(result, start)
        return result

    async def validate_with_schema(self, xml_text: str) -> ValidationResult:
        """
        Validate structurally, then against the XSD of the detected kind.

        The XSD stage only runs when the structural result is valid, a
        schema validator is configured and the text names a known
        initiation element. Its errors replace the valid result.
        """
        start = time.time()
        result = self._validate_document(xml_text)
        if result.is_valid and self.schema_validator is not None:
            result = await self._validate_schema(xml_text, result)
        self._record(result, start)
        return result

    def _validate_document(self, data: Any) -> ValidationResult:
        kind = MessageKind.UNRECOGNIZED

        try:
            if not isinstance(data, str):
                raise TypeError(f"Input must be XML text, got {type(data).__name__}")

            tree = parse_xml(data)
            kind = classify(tree)

            errors = validate_structure(tree, kind)
            if errors:
                raise StructuralException(errors)

            summary = extract(tree, kind)
            return self._valid(f"SEPA {kind.label} XML file appears valid", summary, kind)

        except SepaValidatorException as e:
            logger.info(f"SEPA validation failed ({e.error_code}): {e.message}")
            return self._from_exception(e, kind=kind)

        except Exception as e:
            logger.exception(f"Unexpected error during SEPA validation: {e}")
            return self._invalid(
                f"{UNEXPECTED_FAILURE_PREFIX}{e}",
                "VALIDATION_ERROR",
                kind=kind,
            )

    async def _validate_schema(self, xml_text: str, result: ValidationResult) -> ValidationResult:
        kind = MessageKind.from_marker_text(xml_text)
        schema_url = self.schema_urls.get(kind) if kind else None
        if not schema_url:
            return result

        try:
            schema_text = await self.schema_loader.load(schema_url)
            errors = self.schema_validator(xml_text, schema_text)
            if inspect.isawaitable(errors):
                errors = await errors
        except SepaValidatorException as e:
            logger.warning(f"XSD validation could not run ({e.error_code}): {e.message}")
            return self._invalid(f"{SCHEMA_FAILURE_PREFIX}{e.message}", e.error_code, kind=kind)
        except Exception as e:
            logger.warning(f"XSD validation could not run: {e}")
            return self._invalid(
                f"{SCHEMA_FAILURE_PREFIX}{e}",
                "SCHEMA_VALIDATION_ERROR",
                kind=kind,
            )

        if errors:
            errors = list(errors)
            logger.info(f"XSD validation reported {len(errors)} error(s) against {schema_url}")
            return self._invalid(
                "\n".join([SCHEMA_ERRORS_HEADER] + errors),
                "SCHEMA_VALIDATION_ERROR",
                errors=errors,
                kind=kind,
            )

        return result

    @staticmethod
    def _record(result: ValidationResult, start: float) -> None:
        VALIDATION_DURATION.observe(time.time() - start)
        VALIDATION_COUNTER.labels(
            kind=result.kind.code,
            outcome="valid" if result.is_valid else result.error_code,
        ).inc()


def validate_sepa_xml(xml_text: str) -> ValidationResult:
    """Validate a document with a default, schema-less validator."""
    return SepaValidator().validate(xml_text)
