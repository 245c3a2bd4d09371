"""
Default XSD validation capability using lxml.
"""

from typing import List
import re
import logging

from lxml import etree

from sepa_validator.core.exceptions import SchemaValidationException

logger = logging.getLogger(__name__)

XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


def _to_bytes(text: str) -> bytes:
    # The text is already decoded, so drop a declaration that may name
    # another encoding and hand lxml UTF-8
    text = XML_DECLARATION.sub("", text.lstrip("\ufeff"), count=1)
    return text.encode("utf-8")


def validate_against_schema(xml_text: str, schema_text: str) -> List[str]:
    """
    Validate an XML document against an XSD.

    Args:
        xml_text: Document to validate
        schema_text: XSD document

    Returns:
        Violation messages, empty when the document conforms.

    Raises:
        SchemaValidationException: the schema or the document could not be
            loaded by lxml.
    """
    parser = etree.XMLParser(load_dtd=False, no_network=True, resolve_entities=False)

    try:
        schema = etree.XMLSchema(etree.fromstring(_to_bytes(schema_text), parser=parser))
    except (etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
        raise SchemaValidationException(f"Invalid XSD schema: {e}") from e

    try:
        document = etree.fromstring(_to_bytes(xml_text), parser=parser)
    except etree.XMLSyntaxError as e:
        raise SchemaValidationException(f"Unable to parse XML for XSD validation: {e}") from e

    if schema.validate(document):
        return []

    errors = [f"Line {err.line}: {err.message}" for err in schema.error_log]
    logger.debug(f"XSD validation reported {len(errors)} error(s)")
    return errors
