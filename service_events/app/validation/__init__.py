"""
Validation package for the Events Service.
"""

from .schema_validator import SchemaValidator, ValidationResult

__all__ = ["SchemaValidator", "ValidationResult"]
