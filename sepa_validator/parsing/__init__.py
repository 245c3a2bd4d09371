"""
XML parsing and message classification stages.
"""

from typing import List

from sepa_validator.parsing.xml_tree import XmlNode, XmlTree, parse_xml
from sepa_validator.parsing.classifier import classify

__all__: List[str] = [
    "XmlNode",
    "XmlTree",
    "parse_xml",
    "classify",
]
