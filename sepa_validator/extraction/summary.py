"""
SEPA Summary Data Structures

Normalised, read-only summary of a validated SEPA document. Values are the raw
element text, never parsed. Optional fields are None when the element is
absent; transaction fields default to an empty string instead.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class GroupHeaderInfo:
    """Group header (GrpHdr) fields."""

    msg_id: Optional[str] = None
    creation_date: Optional[str] = None
    nb_of_txs: Optional[str] = None
    ctrl_sum: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "msgId": self.msg_id,
            "creationDate": self.creation_date,
            "nbOfTxs": self.nb_of_txs,
            "ctrlSum": self.ctrl_sum,
        }


@dataclass(frozen=True)
class PaymentInfo:
    """One payment information (PmtInf) batch."""

    id: Optional[str] = None
    method: Optional[str] = None
    batch: Optional[str] = None
    service_level: Optional[str] = None
    local_instrument: Optional[str] = None
    sequence_type: Optional[str] = None
    collection_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "id": self.id,
            "method": self.method,
            "batch": self.batch,
            "serviceLevel": self.service_level,
            "localInstrument": self.local_instrument,
            "sequenceType": self.sequence_type,
            "collectionDate": self.collection_date,
        }


@dataclass(frozen=True)
class TransactionInfo:
    """One credit transfer or direct debit transaction."""

    name: str = ""
    iban: str = ""
    reference: str = ""
    amount: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "iban": self.iban,
            "reference": self.reference,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class MandateInfo:
    """Mandate related information (MndtRltdInf), direct debit only."""

    mandate_id: Optional[str] = None
    signature_date: Optional[str] = None
    # Read from AmdmntInd, see DESIGN.md
    sequence_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "mandateId": self.mandate_id,
            "signatureDate": self.signature_date,
            "sequenceType": self.sequence_type,
        }


@dataclass(frozen=True)
class SepaSummary:
    """Complete summary of a valid SEPA document."""

    header: GroupHeaderInfo = field(default_factory=GroupHeaderInfo)
    payments: Tuple[PaymentInfo, ...] = ()
    transactions: Tuple[TransactionInfo, ...] = ()
    mandates: Tuple[MandateInfo, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "header": self.header.to_dict(),
            "payments": [p.to_dict() for p in self.payments],
            "transactions": [t.to_dict() for t in self.transactions],
            "mandates": [m.to_dict() for m in self.mandates],
        }
