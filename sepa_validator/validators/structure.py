"""
Structural validation: presence checks for the elements a SEPA initiation
document needs. Every rule runs; violations are reported in rule order.
"""

from typing import List, Tuple
import logging

from sepa_validator.parsing.xml_tree import XmlTree
from sepa_validator.sepa_codes import (
    BASE_REQUIRED_ELEMENTS,
    MANDATE_INFO_TAG,
    PAYMENT_INFO_TAG,
    MessageKind,
)

logger = logging.getLogger(__name__)


def required_elements(kind: MessageKind) -> Tuple[str, ...]:
    """Required element names for a kind, in check order."""
    if kind.initiation_tag:
        return BASE_REQUIRED_ELEMENTS + (kind.initiation_tag,)
    return BASE_REQUIRED_ELEMENTS


def validate_structure(tree: XmlTree, kind: MessageKind) -> List[str]:
    """
    Check required elements and sub-structures.

    Args:
        tree: Parsed document
        kind: Classified message kind

    Returns:
        Error messages in discovery order; empty when the structure passes.
    """
    errors: List[str] = []

    for name in required_elements(kind):
        if not tree.contains(name):
            errors.append(f"Required element missing: {name}")

    if not tree.contains(PAYMENT_INFO_TAG):
        errors.append(
            f"At least one {PAYMENT_INFO_TAG} element is required for {kind.plural or 'payments'}"
        )

    if kind is MessageKind.DIRECT_DEBIT and not tree.contains(MANDATE_INFO_TAG):
        errors.append(
            f"At least one {MANDATE_INFO_TAG} element (mandate information) "
            f"is required for {kind.plural}"
        )

    if errors:
        logger.debug(f"Structural validation found {len(errors)} error(s) for {kind.code}")

    return errors
