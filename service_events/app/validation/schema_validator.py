"""
JSON Schema validation of the event data document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from shared.logging import get_logger


@dataclass
class ValidationResult:
    """Verdict plus every violation message, in the order they were found."""
    valid: bool
    errors: List[str] = field(default_factory=list)


class SchemaValidator:
    """Validates documents against a schema fetched at runtime."""

    def __init__(self):
        self.logger = get_logger("events.schema_validator")

    def validate(self, document: Dict[str, Any], schema: Dict[str, Any]) -> ValidationResult:
        """Validate ``document`` against ``schema``.

        The validator class follows the schema's ``$schema`` keyword and
        defaults to Draft 2020-12. A malformed schema is reported as a single
        violation instead of raising.
        """
        try:
            validator_cls = validator_for(schema, default=Draft202012Validator)
            validator_cls.check_schema(schema)
            validator = validator_cls(schema)
            errors = [self._format_error(err) for err in validator.iter_errors(document)]
        except SchemaError as exc:
            errors = [f"Invalid schema: {exc.message}"]

        if errors:
            self.logger.error(
                "Event data validation failed",
                errors=", ".join(errors),
                error_count=len(errors)
            )
            return ValidationResult(valid=False, errors=errors)

        return ValidationResult(valid=True)

    @staticmethod
    def _format_error(err) -> str:
        path = ".".join(str(p) for p in err.absolute_path)
        location = f" at '{path}'" if path else ""
        return f"{err.message}{location}"
