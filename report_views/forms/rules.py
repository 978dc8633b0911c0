"""
Validation rules attached to form elements.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Rule:
    """A check on one element value, with the message shown when it fails."""

    message: str

    def validate(self, value: Any, data: Mapping[str, Any]) -> bool:
        raise NotImplementedError


@dataclass
class RequiredRule(Rule):
    """Value must be present and not empty."""

    def validate(self, value: Any, data: Mapping[str, Any]) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ''
        return True


@dataclass
class EqualsRule(Rule):
    """Value must equal the submitted value of another element."""

    other: str = ''

    def validate(self, value: Any, data: Mapping[str, Any]) -> bool:
        return value == data.get(self.other)
