"""Reports package for Report Views."""

from .visit_log import VisitLog, Site, Visit, PageView
from .report import Report
from .registry import ReportRegistry, report_registry
from .sample_data import seed_sample_visits

__all__ = [
    'VisitLog',
    'Site',
    'Visit',
    'PageView',
    'Report',
    'ReportRegistry',
    'report_registry',
    'seed_sample_visits',
]
