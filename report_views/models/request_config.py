"""
Request config - properties controlling how report data is requested.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, List, Mapping, Optional

from models.property_bag import PropertyBag


def _default_overridable_properties() -> List[str]:
    return [
        'filter_sort_column',
        'filter_sort_order',
        'filter_limit',
        'filter_offset',
        'filter_pattern',
        'filter_column',
        'filter_excludelowpop',
        'filter_excludelowpop_value',
    ]


@dataclass
class RequestConfig(PropertyBag):
    """Request properties of a report view."""

    client_side_properties: List[str] = dataclass_field(default_factory=list)
    overridable_properties: List[str] = dataclass_field(
        default_factory=_default_overridable_properties
    )

    # Column excluded rows are compared on, and the minimum value to keep
    filter_excludelowpop: str = ''
    # 0 keeps rows above 2% of the column total
    filter_excludelowpop_value: float = 0

    filter_sort_column: str = ''
    filter_sort_order: str = 'desc'

    # None keeps every row
    filter_limit: Optional[int] = None
    filter_offset: int = 0

    filter_pattern: str = ''
    filter_column: str = 'label'

    # Query parameter name/value overrides for data requests,
    # e.g. {'idSite': 2, 'period': 'month'}
    request_parameters_to_modify: Dict[str, Any] = dataclass_field(default_factory=dict)

    # 'Module.action' of the data source; defaults to the controller report
    api_method_to_request_data: str = ''

    def get_api_module_to_request(self) -> str:
        return self.api_method_to_request_data.partition('.')[0]

    def get_api_method_to_request(self) -> str:
        return self.api_method_to_request_data.partition('.')[2]


@dataclass
class VisualizationRequestConfig(RequestConfig):
    """Request properties of visualizations, with filter switches."""

    # Skip generic filters (pattern, low population, sort, limit)
    disable_generic_filters: bool = False

    # Skip queued filters; priority filters always run
    disable_queued_filters: bool = False

    def __post_init__(self):
        self.add_overridable_properties([
            'disable_generic_filters',
            'disable_queued_filters',
        ])

    def are_queued_filters_disabled(self) -> bool:
        """Check whether queued filters have been disabled."""
        return bool(self.disable_queued_filters)

    def are_generic_filters_disabled(self, request_params: Optional[Mapping[str, Any]] = None) -> bool:
        """
        Check whether generic filters have been disabled.

        Either the 'disable_generic_filters' request parameter being 1 or the
        property being True disables them.

        Args:
            request_params: Inbound query parameters

        Returns:
            True if generic filters must not run
        """
        # if disable_generic_filters query param is set to '1', generic filters are disabled
        if _equals_one((request_params or {}).get('disable_generic_filters', '0')):
            return True

        if self.disable_generic_filters is True:
            return True

        return False


def _equals_one(value: Any) -> bool:
    """Loose numeric comparison with 1: '1', '1.0' and 1 all match."""
    if isinstance(value, bool):
        return value
    try:
        return float(str(value).strip()) == 1
    except ValueError:
        return False
