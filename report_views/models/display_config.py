"""
Display config - base display properties for report views.
Changing these properties changes how a report is displayed.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, Iterable, List, Optional

from config.settings import Settings
from config.translations import Translations
from models.property_bag import PropertyBag
from utils.logger import logger
from utils.urls import get_base_report_url


def _default_overridable_properties() -> List[str]:
    return ['show_footer', 'show_footer_icons', 'show_all_views_icons', 'export_limit']


def _default_export_limit() -> int:
    return Settings.API_DATATABLE_DEFAULT_LIMIT


@dataclass
class DisplayConfig(PropertyBag):
    """
    Base display properties of a report view.

    Client side properties are passed on to the browser. Overridable properties
    can be set through the query string: when a request carries a parameter
    named like an overridable property, the property takes the parameter value.

    Visualizations that need their own display properties subclass this
    dataclass, declare the new fields and register them in ``__post_init__``.
    """

    # Property tags
    client_side_properties: List[str] = dataclass_field(default_factory=list)
    overridable_properties: List[str] = dataclass_field(
        default_factory=_default_overridable_properties
    )

    # Footer icon groups, e.g. [{'class': 'tableIcons', 'buttons': [...]}].
    # None shows the default icons.
    footer_icons: Optional[List[Dict[str, Any]]] = None

    # Column name => display name
    translations: Dict[str, str] = dataclass_field(
        default_factory=Translations.get_default_metric_translations
    )

    show_footer: bool = True
    show_footer_icons: bool = True

    # Columns shown by the view, e.g. ['label', 'nb_visits', 'nb_uniq_visitors']
    columns_to_display: List[str] = dataclass_field(default_factory=list)

    show_all_views_icons: bool = True

    # Report documentation and per-metric documentation from report metadata
    documentation: Optional[str] = None
    metrics_documentation: Dict[str, str] = dataclass_field(default_factory=dict)

    # URL used to come back to this report from a related report
    self_url: str = ''

    # Controller action used when requesting subtables
    subtable_controller_action: str = ''

    # filter_limit used in export links
    export_limit: int = dataclass_field(default_factory=_default_export_limit)

    report_id: str = ''
    controller_name: Optional[str] = None
    controller_action: Optional[str] = None

    def set_controller(self, controller_name: str, controller_action: str,
                       metadata_source=None):
        """
        Set the report identity and load its documentation.

        Args:
            controller_name: Report module, e.g. 'Actions'
            controller_action: Report action, e.g. 'getPageUrls'
            metadata_source: Object with ``get_metadata(module, action)``;
                defaults to the global report registry
        """
        self.controller_name = controller_name
        self.controller_action = controller_action
        self.report_id = f"{controller_name}.{controller_action}"
        self.self_url = get_base_report_url(controller_name, controller_action)
        self.subtable_controller_action = controller_action

        self._load_documentation(metadata_source)

    def _load_documentation(self, metadata_source=None):
        """Load documentation from report metadata."""
        if metadata_source is None:
            from reports.registry import report_registry
            metadata_source = report_registry

        self.metrics_documentation = {}

        reports = metadata_source.get_metadata(self.controller_name, self.controller_action)
        if not reports:
            logger.debug(f"No metadata for report {self.report_id}")
            return

        report = reports[0]
        if report.get('metricsDocumentation'):
            self.metrics_documentation = dict(report['metricsDocumentation'])
        if report.get('documentation'):
            self.documentation = report['documentation']

    def set_default_columns_to_display(self, columns: Iterable[str], has_nb_visits: bool,
                                       has_nb_uniq_visitors: bool):
        """
        Pick the columns shown when none were configured.

        Args:
            columns: Columns available in the report
            has_nb_visits: Whether the report has a nb_visits column
            has_nb_uniq_visitors: Whether the report has a nb_uniq_visitors column
        """
        if has_nb_visits or has_nb_uniq_visitors:
            # if unique visitors data is available, show it, otherwise just visits
            if has_nb_uniq_visitors:
                columns_to_display = ['label', 'nb_uniq_visitors']
            else:
                columns_to_display = ['label', 'nb_visits']
        else:
            columns_to_display = list(columns)

        self.columns_to_display = [column for column in columns_to_display if column]

    def add_translation(self, column_name: str, translation: str):
        """Associate display text with a column, overwriting existing text."""
        self.translations[column_name] = translation

    def add_translations(self, translations: Dict[str, str]):
        """Associate display text with several columns."""
        for column_name, translation in translations.items():
            self.add_translation(column_name, translation)

    def get_column_translation(self, column_name: str) -> str:
        """Get the display text of a column, falling back to its name."""
        return self.translations.get(column_name, column_name)
