"""
SEPA Validator

Validation and summary extraction for SEPA payment-initiation XML documents
(ISO 20022 pain.001 credit transfers and pain.008 direct debits).
"""

from typing import List

from sepa_validator.sepa_codes import MessageKind
from sepa_validator.extraction import (
    GroupHeaderInfo,
    PaymentInfo,
    TransactionInfo,
    MandateInfo,
    SepaSummary,
)
from sepa_validator.schema import (
    SchemaCache,
    SchemaLoader,
    HttpSchemaFetcher,
    validate_against_schema,
)
from sepa_validator.validators import (
    ValidationResult,
    SepaValidator,
    validate_sepa_xml,
)

__version__ = "1.0.0"
__all__: List[str] = [
    "MessageKind",
    "GroupHeaderInfo",
    "PaymentInfo",
    "TransactionInfo",
    "MandateInfo",
    "SepaSummary",
    "SchemaCache",
    "SchemaLoader",
    "HttpSchemaFetcher",
    "validate_against_schema",
    "ValidationResult",
    "SepaValidator",
    "validate_sepa_xml",
]
