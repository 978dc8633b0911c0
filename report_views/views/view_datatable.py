"""
ViewDataTable - builds the display and request configs of a report and
renders its rows.
"""

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from config.settings import Settings
from models.errors import InvalidQueryParameterError
from models.request_config import VisualizationRequestConfig
from models.visualization_config import VisualizationConfig
from reports.registry import ReportRegistry, report_registry
from reports.visit_log import VisitLog
from utils.logger import logger
from views.datatable_filters import Rows, run_filter


class ViewDataTable:
    """
    Report view for one request.

    Filters run in three stages: priority filters, then generic filters
    (pattern, low population, sort, limit) unless disabled, then queued
    filters unless disabled.
    """

    def __init__(self, module: str, action: str,
                 request_params: Optional[Mapping[str, Any]] = None,
                 visit_log: Optional[VisitLog] = None,
                 registry: Optional[ReportRegistry] = None):
        """
        Initialize the view.

        Args:
            module: Report module
            action: Report action
            request_params: Inbound query parameters
            visit_log: Data source of the report rows
            registry: Report definitions; defaults to the global registry

        Raises:
            ReportNotFoundError: If the report is not registered
            InvalidQueryParameterError: If an override value is invalid
        """
        self.registry = registry if registry is not None else report_registry
        self.report = self.registry.get(module, action)
        self.request_params: Dict[str, Any] = dict(request_params or {})
        self.visit_log = visit_log if visit_log is not None else VisitLog()

        self.config = VisualizationConfig()
        self.request_config = VisualizationRequestConfig()
        self._total_rows = 0

        self._setup()

    def _setup(self):
        """Fill the configs from report metadata, then apply query overrides."""
        self.config.set_controller(self.report.module, self.report.action, self.registry)
        self.config.title = self.report.name

        for name, value in self.report.view_properties.items():
            if self.config.has_property(name):
                setattr(self.config, name, value)
            else:
                logger.warning(f"Unknown view property '{name}' on {self.report.report_id}")

        self.config.add_related_reports(self.report.related_reports)
        self.request_config.api_method_to_request_data = self.report.report_id

        self.config.apply_query_params(self.request_params)
        self.request_config.apply_query_params(self.request_params)

    def get_data_request_params(self) -> Dict[str, Any]:
        """Request parameters with the request config overrides applied."""
        params = dict(self.request_params)
        params.update(self.request_config.request_parameters_to_modify)
        return params

    def load_rows(self) -> Rows:
        """Fetch the report rows, honoring request parameter overrides."""
        params = self.get_data_request_params()
        rows = self.registry.fetch(
            self.request_config.get_api_module_to_request(),
            self.request_config.get_api_method_to_request(),
            self.visit_log,
            _get_id_site(params),
            _get_day(params),
        )
        return [dict(row) for row in rows]

    def apply_generic_filters(self, rows: Rows) -> Rows:
        """Pattern, low population, sort and limit from the request config."""
        request = self.request_config

        if request.filter_pattern:
            rows = run_filter(rows, 'Pattern', [request.filter_column, request.filter_pattern])

        if request.filter_excludelowpop:
            rows = run_filter(rows, 'ExcludeLowPopulation',
                              [request.filter_excludelowpop, request.filter_excludelowpop_value])

        if request.filter_sort_column:
            rows = run_filter(rows, 'Sort', [request.filter_sort_column, request.filter_sort_order])

        self._total_rows = len(rows)

        if request.filter_limit is not None or request.filter_offset:
            rows = run_filter(rows, 'Limit', [request.filter_offset, request.filter_limit])

        return rows

    def render(self) -> Dict[str, Any]:
        """
        Run the filters and build the payload handed to the client.

        Returns:
            Dictionary with report identity, columns, rows and client side properties
        """
        rows = self.load_rows()
        self._total_rows = len(rows)

        priority_filters, queued_filters = self.config.get_filters_to_run()

        for name_or_callable, parameters in priority_filters:
            rows = run_filter(rows, name_or_callable, parameters)
        self._total_rows = len(rows)

        if self.request_config.are_generic_filters_disabled(self.request_params):
            logger.debug(f"Generic filters disabled for {self.config.report_id}")
        else:
            rows = self.apply_generic_filters(rows)

        if self.request_config.are_queued_filters_disabled():
            logger.debug(f"Queued filters disabled for {self.config.report_id}")
        else:
            for name_or_callable, parameters in queued_filters:
                rows = run_filter(rows, name_or_callable, parameters)

        if not self.config.columns_to_display:
            available = _collect_columns(rows)
            self.config.set_default_columns_to_display(
                available,
                'nb_visits' in available,
                'nb_uniq_visitors' in available,
            )
        columns = list(self.config.columns_to_display)

        logger.metric(f"{self.config.report_id} rows", len(rows))

        return {
            'report_id': self.config.report_id,
            'title': self.config.title,
            'documentation': self.config.documentation,
            'metrics_documentation': dict(self.config.metrics_documentation),
            'columns': columns,
            'column_translations': {
                column: self.config.get_column_translation(column) for column in columns
            },
            'rows': [{column: row.get(column) for column in columns} for row in rows],
            'total_rows': self._total_rows,
            'offset': self.request_config.filter_offset,
            'limit': self.request_config.filter_limit,
            'self_url': self.config.self_url,
            'related_reports': (
                dict(self.config.related_reports) if self.config.show_related_reports else {}
            ),
            'properties': self.config.get_client_side_properties(),
        }


def _get_id_site(params: Mapping[str, Any]) -> int:
    value = params.get('idSite', Settings.DEFAULT_ID_SITE)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidQueryParameterError('idSite', value, 'int')


def _get_day(params: Mapping[str, Any]) -> Optional[date]:
    value = params.get('date')
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise InvalidQueryParameterError('date', value, 'a YYYY-MM-DD date')


def _collect_columns(rows: Rows) -> List[str]:
    """Column names of the rows in first-seen order."""
    columns: List[str] = []
    for row in rows:
        for column in row:
            if column not in columns:
                columns.append(column)
    return columns
