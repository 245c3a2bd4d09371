"""
Schema retrieval, caching and XSD validation capabilities.
"""

from typing import List

from sepa_validator.schema.cache import SchemaCache, SchemaLoader
from sepa_validator.schema.http import HttpSchemaFetcher
from sepa_validator.schema.xsd import validate_against_schema

__all__: List[str] = [
    "SchemaCache",
    "SchemaLoader",
    "HttpSchemaFetcher",
    "validate_against_schema",
]
