"""
Report model - metadata and data provider of one report.
"""

from dataclasses import dataclass, field as dataclass_field
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from reports.visit_log import VisitLog


# (visit log, idsite, day) => rows
RowProvider = Callable[[VisitLog, int, Optional[date]], List[Dict[str, Any]]]


@dataclass
class Report:
    """A report definition."""

    module: str
    action: str
    name: str
    category: str
    provider: RowProvider

    documentation: Optional[str] = None
    metrics_documentation: Dict[str, str] = dataclass_field(default_factory=dict)

    # 'Module.action' => title
    related_reports: Dict[str, str] = dataclass_field(default_factory=dict)

    # Display overrides applied to the view of this report
    view_properties: Dict[str, Any] = dataclass_field(default_factory=dict)

    @property
    def report_id(self) -> str:
        return f"{self.module}.{self.action}"

    def get_metadata(self) -> Dict[str, Any]:
        """Metadata as returned by the report metadata API."""
        metadata: Dict[str, Any] = {
            'category': self.category,
            'name': self.name,
            'module': self.module,
            'action': self.action,
        }
        if self.documentation:
            metadata['documentation'] = self.documentation
        if self.metrics_documentation:
            metadata['metricsDocumentation'] = dict(self.metrics_documentation)
        if self.related_reports:
            metadata['relatedReports'] = dict(self.related_reports)
        return metadata

    def fetch(self, visit_log: VisitLog, idsite: int, day: Optional[date] = None) -> List[Dict[str, Any]]:
        """Get the report rows for a site."""
        return self.provider(visit_log, idsite, day)

    def __repr__(self) -> str:
        return f"Report({self.report_id} - {self.name})"
