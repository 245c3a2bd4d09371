"""
SEPA Summary Extractor

Walks a structurally valid document and builds a SepaSummary. Every lookup is
a descendant search by local tag name; a missing element short-circuits to
None (or to "" for transaction fields) and never raises.
"""

from typing import Optional
import logging

from sepa_validator.extraction.summary import (
    GroupHeaderInfo,
    MandateInfo,
    PaymentInfo,
    SepaSummary,
    TransactionInfo,
)
from sepa_validator.parsing.xml_tree import XmlNode, XmlTree
from sepa_validator.sepa_codes import MANDATE_INFO_TAG, PAYMENT_INFO_TAG, MessageKind

logger = logging.getLogger(__name__)


def _nested_text(node: Optional[XmlNode], *path: str) -> Optional[str]:
    """Follow a chain of first-descendant lookups; None as soon as a link is missing."""
    for name in path:
        if node is None:
            return None
        node = node.first(name)
    return node.text_content if node is not None else None


def _text_or_empty(node: Optional[XmlNode], *path: str) -> str:
    # Empty text counts as missing, so "" either way
    return _nested_text(node, *path) or ""


def extract_header(tree: XmlTree) -> GroupHeaderInfo:
    group_header = tree.first("GrpHdr")
    if group_header is None:
        return GroupHeaderInfo()

    return GroupHeaderInfo(
        msg_id=group_header.text_of("MsgId"),
        creation_date=group_header.text_of("CreDtTm"),
        nb_of_txs=group_header.text_of("NbOfTxs"),
        ctrl_sum=group_header.text_of("CtrlSum"),
    )


def extract_payment(payment: XmlNode) -> PaymentInfo:
    return PaymentInfo(
        id=payment.text_of("PmtInfId"),
        method=payment.text_of("PmtMtd"),
        batch=payment.text_of("BtchBookg"),
        service_level=_nested_text(payment, "SvcLvl", "Cd"),
        local_instrument=_nested_text(payment, "LclInstrm", "Cd"),
        sequence_type=payment.text_of("SeqTp"),
        collection_date=payment.text_of("ReqdColltnDt"),
    )


def extract_transaction(transaction: XmlNode, kind: MessageKind) -> TransactionInfo:
    """Read counterparty name, IBAN, remittance and amount of one transaction."""
    return TransactionInfo(
        name=_text_or_empty(transaction, kind.party_tag, "Nm"),
        iban=_text_or_empty(transaction, kind.account_tag, "IBAN"),
        reference=_text_or_empty(transaction, "RmtInf", "Ustrd"),
        amount=_text_or_empty(transaction, "InstdAmt"),
    )


def extract_mandate(mandate: XmlNode) -> MandateInfo:
    return MandateInfo(
        mandate_id=mandate.text_of("MndtId"),
        signature_date=mandate.text_of("DtOfSgntr"),
        sequence_type=mandate.text_of("AmdmntInd"),
    )


def extract(tree: XmlTree, kind: MessageKind) -> SepaSummary:
    """
    Build the summary of a document that passed structural validation.

    Args:
        tree: Parsed document
        kind: Classified message kind, selects transaction and party tags

    Returns:
        SepaSummary with header, payments, transactions and, for direct
        debits, mandates, each in document order.
    """
    payments = tuple(extract_payment(p) for p in tree.elements(PAYMENT_INFO_TAG))

    transactions = ()
    if kind.transaction_tag:
        transactions = tuple(
            extract_transaction(tx, kind) for tx in tree.elements(kind.transaction_tag)
        )

    mandates = ()
    if kind is MessageKind.DIRECT_DEBIT:
        mandates = tuple(extract_mandate(m) for m in tree.elements(MANDATE_INFO_TAG))

    logger.debug(
        f"Extracted {len(payments)} payment(s), {len(transactions)} transaction(s), "
        f"{len(mandates)} mandate(s)"
    )

    return SepaSummary(
        header=extract_header(tree),
        payments=payments,
        transactions=transactions,
        mandates=mandates,
    )
