"""
SEPA Message Codes and Constants

Message kinds recognised by the validator and the ISO 20022 tag names each
kind drives.
"""

from enum import Enum
from typing import Optional


# Every SEPA initiation document lives in an ISO 20022 namespace
ISO20022_NAMESPACE_MARKER = "urn:iso:std:iso:20022"

# Elements required in every document, checked in this order
BASE_REQUIRED_ELEMENTS = ("Document", "GrpHdr", "NbOfTxs", "CtrlSum")

PAYMENT_INFO_TAG = "PmtInf"
MANDATE_INFO_TAG = "MndtRltdInf"

# Default XSD locations for the supported message versions
PAIN_001_SCHEMA_URL = (
    "https://raw.githubusercontent.com/ISO20022/ISO20022/master/Repository/Pain/pain.001.001.03.xsd"
)
PAIN_008_SCHEMA_URL = (
    "https://raw.githubusercontent.com/ISO20022/ISO20022/master/Repository/Pain/pain.008.001.02.xsd"
)


class MessageKind(Enum):
    """SEPA payment-initiation message kinds."""

    CREDIT_TRANSFER = (
        "CreditTransfer",
        "CstmrCdtTrfInitn",
        "CdtTrfTxInf",
        "Cdtr",
        "CdtrAcct",
        "credit transfer",
        "transfers",
    )
    DIRECT_DEBIT = (
        "DirectDebit",
        "CstmrDrctDbtInitn",
        "DrctDbtTxInf",
        "Dbtr",
        "DbtrAcct",
        "direct debit",
        "debits",
    )
    UNRECOGNIZED = ("Unrecognized", "", "", "", "", "", "")

    def __init__(
        self,
        code: str,
        initiation_tag: str,
        transaction_tag: str,
        party_tag: str,
        account_tag: str,
        label: str,
        plural: str,
    ):
        self.code = code
        self.initiation_tag = initiation_tag
        self.transaction_tag = transaction_tag
        self.party_tag = party_tag
        self.account_tag = account_tag
        self.label = label
        self.plural = plural

    @classmethod
    def detection_order(cls):
        """Kinds in the order their markers are looked for. First match wins."""
        return (cls.CREDIT_TRANSFER, cls.DIRECT_DEBIT)

    @classmethod
    def from_marker_text(cls, xml_text: str) -> Optional["MessageKind"]:
        """Detect the kind from raw text by searching for its initiation tag."""
        for kind in cls.detection_order():
            if kind.initiation_tag in xml_text:
                return kind
        return None
