"""
Visualization config - display properties shared by visualizations.
Adds chart, search, sorting and pagination toggles, filters and related reports.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from config.settings import Settings
from models.display_config import DisplayConfig
from models.filters import FilterToRun, make_filter, split_filters
from utils.logger import logger
from utils.urls import get_base_report_url


VISUALIZATION_OVERRIDABLE_PROPERTIES = [
    'show_goals',
    'show_exclude_low_population',
    'show_flatten_table',
    'show_table',
    'show_table_all_columns',
    'show_active_view_icon',
    'show_related_reports',
    'show_limit_control',
    'show_search',
    'enable_sort',
    'show_bar_chart',
    'show_pie_chart',
    'show_tag_cloud',
    'show_export_as_rss_feed',
    'show_ecommerce',
    'search_recursive',
    'show_export_as_image_icon',
    'show_pagination_control',
    'show_offset_information',
    'hide_annotations_view',
]

VISUALIZATION_CLIENT_SIDE_PROPERTIES = [
    'show_limit_control',
]


@dataclass
class VisualizationConfig(DisplayConfig):
    """Display properties for DataTable visualizations."""

    # Show the visualization without the surrounding controls
    show_visualization_only: bool = False

    show_goals: bool = False
    show_exclude_low_population: bool = True
    show_flatten_table: bool = True

    # Footer icons switching to the normal and 'All Columns' tables
    show_table: bool = True
    show_table_all_columns: bool = True

    # Caret over the active view icon
    show_active_view_icon: bool = True

    # URL => title of reports listed below the view
    related_reports: Dict[str, str] = dataclass_field(default_factory=dict)

    # Report title; must be set when related reports are added
    title: str = ''

    show_related_reports: bool = True

    # Extra data serialized for the client side DataTable class
    custom_parameters: Dict[str, Any] = dataclass_field(default_factory=dict)

    show_limit_control: bool = True
    show_search: bool = True
    enable_sort: bool = True
    show_bar_chart: bool = True
    show_pie_chart: bool = True
    show_tag_cloud: bool = True
    show_export_as_rss_feed: bool = True
    show_ecommerce: bool = False

    # HTML message displayed under the view
    show_footer_message: Optional[str] = None

    # Row metadata holding the tooltip of a row
    tooltip_metadata_name: Optional[str] = None

    datatable_css_class: Optional[str] = None
    datatable_js_type: str = Settings.DATATABLE_JS_TYPE

    # Search through subtables as well
    search_recursive: bool = False

    # Unit of the displayed column when only one metric is shown
    y_axis_unit: Optional[str] = None

    show_export_as_image_icon: bool = False

    # NamedFilter / CallableFilter entries, bare callables or
    # (name or callable, parameters, priority) triples
    filters: List[Any] = dataclass_field(default_factory=list)

    show_pagination_control: bool = True
    show_offset_information: bool = True
    hide_annotations_view: bool = True
    report_last_updated_message: Optional[str] = None
    metadata: Dict[str, Any] = dataclass_field(default_factory=dict)

    def __post_init__(self):
        self.add_overridable_properties(VISUALIZATION_OVERRIDABLE_PROPERTIES)
        self.add_client_side_properties(VISUALIZATION_CLIENT_SIDE_PROPERTIES)

    def add_filter(self, name_or_callable: Union[str, Callable], parameters=None,
                   priority: bool = False):
        """
        Queue a filter to run before the view is displayed.

        Priority filters run before generic filters and should be the ones that
        add or delete rows.

        Args:
            name_or_callable: Registered filter name or callable
            parameters: Filter parameters
            priority: Whether this is a priority filter
        """
        self.filters.append(make_filter(name_or_callable, parameters, priority))

    def get_filters_to_run(self) -> Tuple[List[FilterToRun], List[FilterToRun]]:
        """
        Split the configured filters into priority and queued filters.

        Returns:
            (priority filters, queued filters) as (name or callable, parameters) pairs

        Raises:
            InvalidFilterError: If an entry is not a filter or a callable
        """
        return split_filters(self.filters)

    def add_related_report(self, related_report: str, title: str,
                           query_params: Optional[Dict[str, Any]] = None):
        """
        List another report below this view.

        Reports pointing at the current report are not added.

        Args:
            related_report: Report id formatted as 'Module.action'
            title: Link title
            query_params: Extra query parameters for the report URL
        """
        module, separator, action = related_report.partition('.')
        if not separator or not module or not action:
            raise ValueError(f"Related report must be 'Module.action', got {related_report!r}")

        # don't add the related report if it references this report
        if self.controller_name == module and self.controller_action == action:
            logger.debug(f"Skipping self reference in related reports of {self.report_id}")
            return

        url = get_base_report_url(module, action, query_params)
        self.related_reports[url] = title

    def add_related_reports(self, related_reports: Dict[str, str]):
        """Add several related reports given as report id => title."""
        for related_report, title in related_reports.items():
            self.add_related_report(related_report, title)
