"""
Form element model - a single input of a form.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, List, Mapping, Optional

from forms.rules import EqualsRule, RequiredRule, Rule


@dataclass
class FormElement:
    """An input declared on a form, with its validation rules."""

    element_type: str                 # text, password, hidden, checkbox, submit
    name: str
    rules: List[Rule] = dataclass_field(default_factory=list)
    value: Optional[Any] = None

    def add_rule(self, rule_type: str, message: str,
                 other: Optional['FormElement'] = None) -> 'FormElement':
        """
        Attach a validation rule.

        Args:
            rule_type: 'required' or 'eq'
            message: Error message shown when the rule fails
            other: Element compared against for 'eq'

        Returns:
            This element, so calls can be chained
        """
        if rule_type == 'required':
            self.rules.append(RequiredRule(message))
        elif rule_type == 'eq':
            if other is None:
                raise ValueError("'eq' rule needs an element to compare with")
            self.rules.append(EqualsRule(message, other.name))
        else:
            raise ValueError(f"Unknown rule type: {rule_type}")
        return self

    def validate(self, data: Mapping[str, Any]) -> Optional[str]:
        """
        Run the rules in order.

        Returns:
            Message of the first failing rule, None if all pass
        """
        value = data.get(self.name)
        for rule in self.rules:
            if not rule.validate(value, data):
                return rule.message
        return None

    def is_submit(self) -> bool:
        """Check if this is a submit button."""
        return self.element_type == 'submit'

    def is_checkbox(self) -> bool:
        return self.element_type == 'checkbox'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'type': self.element_type,
            'name': self.name,
            'value': self.value,
            'rules': [type(rule).__name__ for rule in self.rules],
        }

    def __repr__(self) -> str:
        return f"FormElement({self.element_type} - {self.name})"
