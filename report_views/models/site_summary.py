"""
Site summary model - one row of the all websites dashboard.
"""

import math
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


_LEADING_FLOAT = re.compile(r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_float(value: Any) -> float:
    """
    Parse the leading number of a value, NaN if there is none.

    '12.5%' gives 12.5 and 'n/a' gives NaN.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _LEADING_FLOAT.match(str(value if value is not None else ''))
    if not match:
        return math.nan
    return float(match.group(0))


@dataclass
class SiteSummaryRow:
    """Visits, pageviews and revenue of a site with their evolution values."""

    idsite: int
    visits: int
    pageviews: int
    revenue: float
    name: str
    url: str
    visits_summary_value: float
    pageviews_summary_value: float
    revenue_summary_value: float = 0.0

    @classmethod
    def from_values(cls, idsite: int, visits: int, pageviews: int, revenue: float,
                    name: str, url: str, visits_summary_value: Any,
                    pageviews_summary_value: Any,
                    revenue_summary_value: Optional[Any] = None) -> 'SiteSummaryRow':
        """Build a row, parsing the summary values."""
        revenue_value = parse_float(revenue_summary_value)
        return cls(
            idsite=idsite,
            visits=visits,
            pageviews=pageviews,
            revenue=revenue,
            name=name,
            url=url,
            visits_summary_value=parse_float(visits_summary_value),
            pageviews_summary_value=parse_float(pageviews_summary_value),
            revenue_summary_value=0.0 if math.isnan(revenue_value) else revenue_value,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
