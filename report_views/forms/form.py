"""
Form model - ordered elements validated in a single pass.
"""

from typing import Any, Dict, List, Mapping, Optional

from forms.element import FormElement
from utils.logger import logger


class Form:
    """
    Base form. Subclasses declare their elements in ``init()``.

    Validation runs every element's rules in declaration order and keeps the
    first failing message of each element.
    """

    def __init__(self, form_id: str, method: str = 'post'):
        self.form_id = form_id
        self.method = method
        self.elements: List[FormElement] = []
        self.errors: Dict[str, str] = {}
        self.submitted: Dict[str, Any] = {}
        self.init()

    def init(self):
        """Declare the form elements."""

    def add_element(self, element_type: str, name: str) -> FormElement:
        """Append an element and return it."""
        element = FormElement(element_type=element_type, name=name)
        self.elements.append(element)
        return element

    def get_element(self, name: str) -> Optional[FormElement]:
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def validate(self, data: Mapping[str, Any]) -> bool:
        """
        Validate submitted values.

        Args:
            data: Submitted name => value mapping

        Returns:
            True if every rule passed
        """
        self.submitted = {}
        for element in self.elements:
            if element.is_submit():
                continue
            value = data.get(element.name)
            if element.is_checkbox():
                value = value not in (None, '', '0', 'off')
            self.submitted[element.name] = value
            element.value = value

        self.errors = {}
        for element in self.elements:
            message = element.validate(data)
            if message is not None:
                self.errors[element.name] = message

        if self.errors:
            logger.debug(f"Form {self.form_id} failed validation: {list(self.errors)}")
        return not self.errors

    def get_submit_value(self, name: str) -> Any:
        """Get a value submitted during the last validation."""
        return self.submitted.get(name)

    def get_error_messages(self) -> List[str]:
        """Get the error messages in element order."""
        return [self.errors[e.name] for e in self.elements if e.name in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'form_id': self.form_id,
            'method': self.method,
            'elements': [element.to_dict() for element in self.elements],
            'errors': dict(self.errors),
        }

    def __repr__(self) -> str:
        return f"Form(id={self.form_id}, elements={len(self.elements)}, errors={len(self.errors)})"
