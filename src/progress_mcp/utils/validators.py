"""
Input validation utilities for the progress MCP server.
"""

from typing import Any, Callable, List, Optional, Union
from dataclasses import dataclass
import math

from .errors import InvalidArgumentError


@dataclass
class ValidationRule:
    """Represents a validation rule."""
    name: str
    validator: Callable[[Any], bool]
    message: str
    code: str


def is_number(value: Any) -> bool:
    """True for JSON numbers. Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite(value: Any) -> bool:
    # Python ints are unbounded; only floats can be inf or nan.
    return isinstance(value, int) or math.isfinite(value)


class Validator:
    """Chainable validator for a single argument.

    Rules run in the order they were added and stop at the first failure,
    so later rules may assume earlier ones held.
    """

    def __init__(self, field_name: str):
        self.field_name = field_name
        self.rules: List[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> 'Validator':
        """Add a validation rule."""
        self.rules.append(rule)
        return self

    def required(self, message: Optional[str] = None) -> 'Validator':
        """Require field to be present and not None."""
        return self.add_rule(ValidationRule(
            name="required",
            validator=lambda x: x is not None,
            message=message or f"'{self.field_name}' is required",
            code="REQUIRED"
        ))

    def number(self, message: Optional[str] = None) -> 'Validator':
        """Require a finite JSON number."""
        message = message or f"'{self.field_name}' must be a number"
        self.add_rule(ValidationRule(
            name="number",
            validator=is_number,
            message=message,
            code="NUMBER"
        ))
        return self.add_rule(ValidationRule(
            name="finite",
            validator=is_finite,
            message=message,
            code="FINITE"
        ))

    def range_check(self, min_val: Optional[Union[int, float]] = None,
                    max_val: Optional[Union[int, float]] = None,
                    message: Optional[str] = None) -> 'Validator':
        """Require a numeric field to be within range."""
        def in_range(value: Any) -> bool:
            if min_val is not None and value < min_val:
                return False
            if max_val is not None and value > max_val:
                return False
            return True

        range_desc = []
        if min_val is not None:
            range_desc.append(f">= {min_val}")
        if max_val is not None:
            range_desc.append(f"<= {max_val}")

        return self.add_rule(ValidationRule(
            name="range_check",
            validator=in_range,
            message=message or f"'{self.field_name}' must be {' and '.join(range_desc)}",
            code="RANGE_CHECK"
        ))

    def validate(self, value: Any) -> Any:
        """Validate value against all rules and return it unchanged."""
        for rule in self.rules:
            if not rule.validator(value):
                raise InvalidArgumentError(
                    field=self.field_name,
                    value=value,
                    constraint=rule.message
                )
        return value


def non_negative_number_validator(field_name: str) -> Validator:
    """Finite number >= 0, every failure reported with the same message."""
    message = f"'{field_name}' must be a non-negative number"
    return (Validator(field_name)
            .required(message)
            .number(message)
            .range_check(0, None, message))


__all__ = [
    'ValidationRule',
    'Validator',
    'is_number',
    'is_finite',
    'non_negative_number_validator',
]
