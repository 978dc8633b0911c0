"""
Report registry - lookup of report definitions by module and action.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from models.errors import ReportNotFoundError
from reports.builtin import default_reports
from reports.report import Report
from reports.visit_log import VisitLog
from utils.logger import logger


class ReportRegistry:
    """Holds report definitions and serves their metadata and rows."""

    def __init__(self, reports: Optional[Iterable[Report]] = None):
        self._reports: Dict[str, Report] = {}
        for report in reports or []:
            self.register(report)

    def register(self, report: Report):
        """Add or replace a report definition."""
        if report.report_id in self._reports:
            logger.warning(f"Replacing report definition {report.report_id}")
        self._reports[report.report_id] = report

    def get(self, module: str, action: str) -> Report:
        """
        Get a report definition.

        Raises:
            ReportNotFoundError: If no report is registered for module/action
        """
        report = self._reports.get(f"{module}.{action}")
        if report is None:
            raise ReportNotFoundError(module, action)
        return report

    def has(self, module: str, action: str) -> bool:
        return f"{module}.{action}" in self._reports

    def get_metadata(self, module: Optional[str] = None,
                     action: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get report metadata, optionally for a single report.

        Returns:
            List of metadata dicts; empty if the report is unknown
        """
        if module is None:
            return [report.get_metadata() for report in self._reports.values()]
        if not self.has(module, action):
            return []
        return [self.get(module, action).get_metadata()]

    def fetch(self, module: str, action: str, visit_log: VisitLog, idsite: int,
              day: Optional[date] = None) -> List[Dict[str, Any]]:
        """Get the rows of a report for a site."""
        report = self.get(module, action)
        visit_log.get_site(idsite)
        rows = report.fetch(visit_log, idsite, day)
        logger.debug(f"Fetched {len(rows)} rows for {report.report_id} (site {idsite})")
        return rows

    def __iter__(self):
        return iter(self._reports.values())

    def __len__(self) -> int:
        return len(self._reports)


# Global registry with the built-in reports
report_registry = ReportRegistry(default_reports())
