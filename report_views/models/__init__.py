"""Data models for Report Views."""

from .display_config import DisplayConfig
from .visualization_config import VisualizationConfig
from .request_config import RequestConfig, VisualizationRequestConfig
from .filters import NamedFilter, CallableFilter
from .site_summary import SiteSummaryRow
from .errors import (
    ReportViewError,
    InvalidFilterError,
    InvalidQueryParameterError,
    ReportNotFoundError,
    SiteNotFoundError,
)

__all__ = [
    'DisplayConfig',
    'VisualizationConfig',
    'RequestConfig',
    'VisualizationRequestConfig',
    'NamedFilter',
    'CallableFilter',
    'SiteSummaryRow',
    'ReportViewError',
    'InvalidFilterError',
    'InvalidQueryParameterError',
    'ReportNotFoundError',
    'SiteNotFoundError',
]
