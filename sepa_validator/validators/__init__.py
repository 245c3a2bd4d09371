"""
SEPA Document Validators

- Result type and abstract validator
- Structural (required element) checks
- Full SEPA pipeline with optional XSD validation
"""

from typing import List

from sepa_validator.validators.base_validator import (
    ValidationResult,
    BaseValidator,
)
from sepa_validator.validators.structure import (
    required_elements,
    validate_structure,
)
from sepa_validator.validators.sepa_validator import (
    SepaValidator,
    validate_sepa_xml,
)

__all__: List[str] = [
    # Base classes
    "ValidationResult",
    "BaseValidator",
    # Structure
    "required_elements",
    "validate_structure",
    # Pipeline
    "SepaValidator",
    "validate_sepa_xml",
]
