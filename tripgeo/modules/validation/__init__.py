"""
modules/validation package — coordinate quality guards before clustering or correction.
"""
from tripgeo.modules.validation.location_validator import (
    ValidationResult,
    validate_location,
    is_valid_location,
    filter_valid,
)

__all__ = [
    "ValidationResult",
    "validate_location",
    "is_valid_location",
    "filter_valid",
]
