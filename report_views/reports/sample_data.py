"""
Sample data - deterministic sites and visits for demos and tests.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional

from reports.visit_log import VisitLog
from utils.logger import logger


SAMPLE_BASE_URL = 'http://localhost/tests/resources/overlay-test-site-real/'

# Pages visited in order by each sample visit ('' is the site index)
VISIT_PROFILES: List[List[str]] = [
    ['', 'page-1.html', 'page-2.html', 'page-3.html', ''],
    ['', 'page-3.html', 'page-4.html'],
    ['', 'page-4.html'],
    ['', 'page-1.html', 'page-3.html', 'page-4.html'],
    ['', 'page-4.html', 'page-1.html'],
    ['', 'page-1.html', ''],
    ['page-4.html', ''],
    ['', 'page-2.html', 'page-3.html'],
    ['', 'page-1.html', 'page-2.html'],
    ['', 'page-6.html', 'page-5.html', 'page-4.html', 'page-3.html', 'page-2.html', 'page-1.html', ''],
    ['', 'page-5.html', 'page-3.html', 'page-1.html'],
    ['', 'page-1.html', 'page-2.html', 'page-3.html'],
    ['', 'page-4.html', 'page-3.html'],
    ['', 'page-1.html', ''],
    ['page-6.html', 'page-3.html', ''],
]

EXTRA_SITE_COUNT = 8


def seed_sample_visits(visit_log: VisitLog, day: Optional[date] = None,
                       base_url: str = SAMPLE_BASE_URL) -> int:
    """
    Create the sample sites and track one visit per profile.

    Sites 1 and 2 are plain sites, site 3 receives the visits, followed by
    eight extra sites for the all websites dashboard.

    Args:
        visit_log: Store to fill
        day: Day of the visits; defaults to yesterday
        base_url: URL the visited pages are relative to

    Returns:
        Id of the site holding the visits
    """
    day = day or (date.today() - timedelta(days=1))
    created = datetime(2011, 1, 1)

    visit_log.create_site('Site 1', 'http://piwik.net', ts_created=created)
    visit_log.create_site('Site 2', 'http://example.org', ts_created=created)
    idsite = visit_log.create_site('Overlay test site', base_url, ts_created=created)

    start = datetime.combine(day, datetime.min.time())
    for visit_count, profile in enumerate(VISIT_PROFILES):
        actions = []
        for idx, page in enumerate(profile):
            timestamp = start + timedelta(hours=visit_count + 0.01 * idx)
            referrer = base_url + profile[idx - 1] if idx != 0 else None
            actions.append((base_url + page, f"page title of {page}", timestamp, referrer))

        visit_log.track_visit(
            idsite,
            visitor_id=f"{visit_count:016x}",
            actions=actions,
            ip=f"123.234.23.{visit_count}",
        )

    for i in range(EXTRA_SITE_COUNT):
        visit_log.create_site(f"Site #{i}", f"http://site{i}.com", ecommerce=True, ts_created=created)

    logger.metric("Sample visits", len(VISIT_PROFILES))
    return idsite
