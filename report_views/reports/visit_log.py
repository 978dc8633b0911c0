"""
Visit log - in-memory store of sites and tracked visits.
Aggregates tracked page views into report rows.
"""

from collections import OrderedDict
from dataclasses import dataclass, field as dataclass_field
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from models.errors import SiteNotFoundError
from utils.logger import logger


@dataclass
class Site:
    """A tracked website."""

    idsite: int
    name: str
    main_url: str
    ecommerce: bool = False
    ts_created: datetime = dataclass_field(default_factory=datetime.now)


@dataclass
class PageView:
    """A single tracked page view action."""

    url: str
    title: str
    timestamp: datetime
    referrer: Optional[str] = None


@dataclass
class Visit:
    """A visit made of ordered page views."""

    idvisit: int
    idsite: int
    visitor_id: str
    ip: Optional[str] = None
    actions: List[PageView] = dataclass_field(default_factory=list)
    revenue: float = 0.0

    @property
    def first_action_time(self) -> Optional[datetime]:
        return self.actions[0].timestamp if self.actions else None

    @property
    def entry_url(self) -> Optional[str]:
        return self.actions[0].url if self.actions else None

    def is_bounce(self) -> bool:
        return len(self.actions) == 1


# (url, title, timestamp, referrer) as accepted by track_visit
ActionInput = Tuple[str, str, datetime, Optional[str]]


class VisitLog:
    """Stores sites and visits and builds aggregated rows from them."""

    def __init__(self):
        self.sites: Dict[int, Site] = OrderedDict()
        self.visits: List[Visit] = []
        self._next_idsite = 1
        self._next_idvisit = 1

    def create_site(self, name: str, main_url: str, ecommerce: bool = False,
                    ts_created: Optional[datetime] = None) -> int:
        """
        Create a website.

        Returns:
            The new site id
        """
        idsite = self._next_idsite
        self._next_idsite += 1
        self.sites[idsite] = Site(
            idsite=idsite,
            name=name,
            main_url=main_url,
            ecommerce=ecommerce,
            ts_created=ts_created or datetime.now(),
        )
        logger.debug(f"Created site {idsite} ({name})")
        return idsite

    def get_site(self, idsite: int) -> Site:
        if idsite not in self.sites:
            raise SiteNotFoundError(idsite)
        return self.sites[idsite]

    def track_visit(self, idsite: int, visitor_id: str, actions: Iterable[ActionInput],
                    ip: Optional[str] = None, revenue: float = 0.0) -> int:
        """
        Record a visit.

        Args:
            idsite: Site the visit belongs to
            visitor_id: Visitor identifier, shared by returning visitors
            actions: (url, title, timestamp, referrer) page views in order
            ip: Visitor IP
            revenue: Ecommerce revenue of the visit

        Returns:
            The new visit id
        """
        self.get_site(idsite)

        page_views = [
            PageView(url=url, title=title, timestamp=timestamp, referrer=referrer)
            for url, title, timestamp, referrer in actions
        ]
        if not page_views:
            raise ValueError("A visit needs at least one action")

        idvisit = self._next_idvisit
        self._next_idvisit += 1
        self.visits.append(Visit(
            idvisit=idvisit,
            idsite=idsite,
            visitor_id=visitor_id,
            ip=ip,
            actions=page_views,
            revenue=revenue,
        ))
        return idvisit

    def get_visits(self, idsite: int, day: Optional[date] = None) -> List[Visit]:
        """Get the visits of a site, optionally limited to one day."""
        return [
            visit for visit in self.visits
            if visit.idsite == idsite
            and (day is None or visit.first_action_time.date() == day)
        ]

    def visits_summary(self, idsite: int, day: Optional[date] = None) -> List[Dict]:
        """Single row with the visit totals of a site."""
        visits = self.get_visits(idsite, day)
        nb_visits = len(visits)
        nb_actions = sum(len(visit.actions) for visit in visits)
        return [{
            'label': self.get_site(idsite).name,
            'nb_visits': nb_visits,
            'nb_uniq_visitors': len({visit.visitor_id for visit in visits}),
            'nb_actions': nb_actions,
            'max_actions': max((len(visit.actions) for visit in visits), default=0),
            'bounce_count': sum(1 for visit in visits if visit.is_bounce()),
            'nb_actions_per_visit': round(nb_actions / nb_visits, 2) if nb_visits else 0,
        }]

    def page_urls(self, idsite: int, day: Optional[date] = None) -> List[Dict]:
        """Rows per page URL."""
        return self._aggregate_actions(idsite, day, key=lambda action: action.url)

    def page_titles(self, idsite: int, day: Optional[date] = None) -> List[Dict]:
        """Rows per page title."""
        return self._aggregate_actions(idsite, day, key=lambda action: action.title)

    def entry_page_urls(self, idsite: int, day: Optional[date] = None) -> List[Dict]:
        """Rows per URL visits started on."""
        rows: Dict[str, Dict] = OrderedDict()
        for visit in self.get_visits(idsite, day):
            row = rows.setdefault(visit.entry_url, {
                'label': visit.entry_url,
                'entry_nb_visits': 0,
                'bounce_count': 0,
                '_visitors': set(),
            })
            row['entry_nb_visits'] += 1
            row['_visitors'].add(visit.visitor_id)
            if visit.is_bounce():
                row['bounce_count'] += 1

        result = []
        for row in rows.values():
            visitors = row.pop('_visitors')
            row['nb_uniq_visitors'] = len(visitors)
            row['bounce_rate'] = f"{round(100 * row['bounce_count'] / row['entry_nb_visits'])}%"
            result.append(row)
        return result

    def all_sites_summary(self, day: date) -> List[Dict]:
        """
        Rows per site with visits, pageviews and revenue on a day, and their
        evolution in percent compared to the previous day.
        """
        previous_day = day - timedelta(days=1)
        rows = []
        for site in self.sites.values():
            current = self._site_totals(site.idsite, day)
            past = self._site_totals(site.idsite, previous_day)
            rows.append({
                'idsite': site.idsite,
                'label': site.name,
                'main_url': site.main_url,
                'nb_visits': current['nb_visits'],
                'nb_pageviews': current['nb_pageviews'],
                'revenue': current['revenue'],
                'visits_evolution': _evolution(current['nb_visits'], past['nb_visits']),
                'pageviews_evolution': _evolution(current['nb_pageviews'], past['nb_pageviews']),
                'revenue_evolution': _evolution(current['revenue'], past['revenue']),
            })
        return rows

    def _site_totals(self, idsite: int, day: date) -> Dict[str, float]:
        visits = self.get_visits(idsite, day)
        return {
            'nb_visits': len(visits),
            'nb_pageviews': sum(len(visit.actions) for visit in visits),
            'revenue': sum(visit.revenue for visit in visits),
        }

    def _aggregate_actions(self, idsite: int, day: Optional[date], key) -> List[Dict]:
        rows: Dict[str, Dict] = OrderedDict()
        for visit in self.get_visits(idsite, day):
            seen_in_visit = set()
            for action in visit.actions:
                label = key(action)
                row = rows.setdefault(label, {
                    'label': label,
                    'nb_hits': 0,
                    'nb_visits': 0,
                    '_visitors': set(),
                })
                row['nb_hits'] += 1
                row['_visitors'].add(visit.visitor_id)
                if label not in seen_in_visit:
                    row['nb_visits'] += 1
                    seen_in_visit.add(label)

        result = []
        for row in rows.values():
            row['nb_uniq_visitors'] = len(row.pop('_visitors'))
            result.append(row)
        return result


def _evolution(current: float, past: float) -> float:
    """Percent change from past to current; 100 when past is 0 and current is not."""
    if past == 0:
        return 100.0 if current else 0.0
    return round((current - past) * 100.0 / past, 1)
