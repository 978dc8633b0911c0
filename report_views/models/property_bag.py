"""
Property bag base - shared bookkeeping for display and request configs.
Tracks client-side and overridable property names and applies query overrides.
"""

from dataclasses import fields
from typing import Any, Dict, Iterable, List, Mapping, Union, get_args, get_origin, get_type_hints

from models.errors import InvalidQueryParameterError
from utils.logger import logger


TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


class PropertyBag:
    """
    Mixin for dataclass configs whose fields are display or request properties.

    Subclasses must be dataclasses declaring ``client_side_properties`` and
    ``overridable_properties`` list fields.
    """

    client_side_properties: List[str]
    overridable_properties: List[str]

    def add_client_side_properties(self, property_names: Iterable[str]):
        """
        Mark properties as available to client side scripts.

        Args:
            property_names: Property names, e.g. ['show_limit_control', 'show_goals']
        """
        for name in property_names:
            self.client_side_properties.append(name)

    def add_overridable_properties(self, property_names: Iterable[str]):
        """
        Mark properties as settable through query parameters.

        Args:
            property_names: Property names, e.g. ['show_limit_control', 'show_goals']
        """
        for name in property_names:
            self.overridable_properties.append(name)

    def property_names(self) -> List[str]:
        """Get every property name, inherited ones included."""
        return [f.name for f in fields(self)]

    def has_property(self, name: str) -> bool:
        """Check whether a name is a declared property."""
        return name in self.property_names()

    def get_properties(self) -> Dict[str, Any]:
        """Get all property values mapped by name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get_client_side_properties(self) -> Dict[str, Any]:
        """Get the values of the client side properties only."""
        properties = {}
        for name in self.client_side_properties:
            if not self.has_property(name):
                logger.debug(f"Client side property '{name}' does not exist, skipping")
                continue
            properties[name] = getattr(self, name)
        return properties

    def apply_query_params(self, params: Mapping[str, Any]) -> List[str]:
        """
        Override properties with matching query parameter values.

        Only overridable properties are considered; unknown parameters are ignored.

        Args:
            params: Inbound query parameters

        Returns:
            Names of the properties that were overridden
        """
        overridden = []
        for name in self.overridable_properties:
            if name not in params or name in overridden:
                continue
            if not self.has_property(name):
                logger.debug(f"Overridable property '{name}' does not exist, skipping")
                continue
            setattr(self, name, self._coerce(name, params[name]))
            overridden.append(name)

        if overridden:
            logger.debug(f"{type(self).__name__} overridden by query: {', '.join(overridden)}")
        return overridden

    def _coerce(self, name: str, value: Any) -> Any:
        """
        Convert a query value to the declared type of a property.

        Args:
            name: Property name
            value: Raw value, usually a string

        Returns:
            Converted value
        """
        target = _resolve_type(get_type_hints(type(self)).get(name, str))

        if target is Any or not isinstance(value, str):
            return value

        text = value.strip()

        if target is bool:
            lowered = text.lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
            raise InvalidQueryParameterError(name, value, 'a boolean')

        if target in (int, float):
            if text == '':
                return getattr(self, name)
            try:
                return target(text)
            except ValueError:
                raise InvalidQueryParameterError(name, value, target.__name__)

        if target is list:
            return [item.strip() for item in text.split(',') if item.strip()]

        return value


def _resolve_type(hint: Any) -> Any:
    """Reduce a type hint to the concrete type used for coercion."""
    if get_origin(hint) is Union:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        hint = args[0] if args else str
    return get_origin(hint) or hint
