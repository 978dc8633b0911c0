"""
URL helpers for report links.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlencode

from config.settings import Settings


def get_base_report_url(module: str, action: str,
                        query_params: Optional[Dict[str, Any]] = None) -> str:
    """
    Build the URL used to request a report without generic filters.

    Args:
        module: Report module, e.g. 'Actions'
        action: Report action, e.g. 'getPageUrls'
        query_params: Extra query parameters appended after module/action

    Returns:
        URL such as 'index.php?module=Actions&action=getPageUrls'
    """
    params: Dict[str, Any] = {'module': module, 'action': action}
    for key, value in (query_params or {}).items():
        if key not in params:
            params[key] = value
    return f"{Settings.BASE_REPORT_URL}?{urlencode(params)}"
