"""
Summary extraction for validated SEPA documents.
"""

from typing import List

from sepa_validator.extraction.summary import (
    GroupHeaderInfo,
    PaymentInfo,
    TransactionInfo,
    MandateInfo,
    SepaSummary,
)
from sepa_validator.extraction.extractor import extract

__all__: List[str] = [
    "GroupHeaderInfo",
    "PaymentInfo",
    "TransactionInfo",
    "MandateInfo",
    "SepaSummary",
    "extract",
]
