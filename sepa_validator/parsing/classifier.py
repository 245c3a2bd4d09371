"""
Message classification: decides whether a parsed document is a SEPA credit
transfer or direct debit initiation.
"""

import logging

from sepa_validator.core.exceptions import NotSepaException
from sepa_validator.parsing.xml_tree import XmlTree
from sepa_validator.sepa_codes import ISO20022_NAMESPACE_MARKER, MessageKind

logger = logging.getLogger(__name__)

NOT_SEPA_MESSAGE = "The file does not appear to be a valid SEPA file"


def classify(tree: XmlTree) -> MessageKind:
    """
    Determine the message kind of a parsed document.

    The root namespace must contain the ISO 20022 marker. The initiation
    element is then searched anywhere in the tree; when both markers are
    present the credit transfer wins.

    Raises:
        NotSepaException: namespace or initiation element missing.
    """
    namespace = tree.root.namespace
    if not namespace or ISO20022_NAMESPACE_MARKER not in namespace:
        raise NotSepaException(NOT_SEPA_MESSAGE, namespace=namespace)

    for kind in MessageKind.detection_order():
        if tree.contains(kind.initiation_tag):
            logger.debug(f"Classified document as {kind.code} (namespace {namespace})")
            return kind

    searched = " or ".join(kind.initiation_tag for kind in MessageKind.detection_order())
    raise NotSepaException(
        f"{NOT_SEPA_MESSAGE} (no {searched} found)",
        namespace=namespace,
    )
