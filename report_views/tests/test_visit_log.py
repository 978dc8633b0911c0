"""
Tests for the visit log aggregations over the sample visits.
"""

from datetime import datetime, timedelta

import pytest

from models.errors import SiteNotFoundError
from reports.visit_log import VisitLog


def test_sample_sites(visit_log):
    assert len(visit_log.sites) == 11
    assert visit_log.get_site(3).name == 'Overlay test site'
    assert visit_log.get_site(4).name == 'Site #0'
    assert visit_log.get_site(11).main_url == 'http://site7.com'
    assert visit_log.get_site(11).ecommerce is True


def test_visits_summary(visit_log, sample_site):
    row, = visit_log.visits_summary(sample_site)

    assert row['nb_visits'] == 15
    assert row['nb_uniq_visitors'] == 15
    assert row['nb_actions'] == 53
    assert row['max_actions'] == 8
    assert row['bounce_count'] == 0
    assert row['nb_actions_per_visit'] == 3.53


def test_page_urls(visit_log, sample_site, base_url):
    rows = {row['label']: row for row in visit_log.page_urls(sample_site)}

    assert len(rows) == 7
    assert rows[base_url]['nb_hits'] == 19
    assert rows[base_url]['nb_visits'] == 15
    assert rows[base_url + 'page-1.html']['nb_hits'] == 9
    assert rows[base_url + 'page-4.html']['nb_visits'] == 7
    assert rows[base_url + 'page-5.html']['nb_uniq_visitors'] == 2


def test_page_titles(visit_log, sample_site):
    rows = {row['label']: row for row in visit_log.page_titles(sample_site)}

    assert rows['page title of page-2.html']['nb_hits'] == 5


def test_entry_pages(visit_log, sample_site, base_url):
    rows = {row['label']: row for row in visit_log.entry_page_urls(sample_site)}

    assert rows[base_url]['entry_nb_visits'] == 13
    assert rows[base_url + 'page-4.html']['entry_nb_visits'] == 1
    assert rows[base_url + 'page-6.html']['bounce_rate'] == '0%'


def test_visits_filtered_by_day(visit_log, sample_site, sample_day):
    assert len(visit_log.get_visits(sample_site, sample_day)) == 15
    assert visit_log.get_visits(sample_site, sample_day - timedelta(days=1)) == []


def test_all_sites_summary(visit_log, sample_day):
    rows = {row['idsite']: row for row in visit_log.all_sites_summary(sample_day)}

    assert rows[3]['nb_visits'] == 15
    assert rows[3]['nb_pageviews'] == 53
    assert rows[3]['visits_evolution'] == 100.0
    assert rows[1]['nb_visits'] == 0
    assert rows[1]['visits_evolution'] == 0.0


def test_evolution_against_previous_day():
    log = VisitLog()
    idsite = log.create_site('Shop', 'http://shop.example')
    today = datetime(2013, 5, 10, 12)
    yesterday = today - timedelta(days=1)

    for visitor in ('a', 'b'):
        log.track_visit(idsite, visitor, [('http://shop.example/', 'Home', yesterday, None)])
    for visitor in ('a', 'b', 'c'):
        log.track_visit(idsite, visitor, [('http://shop.example/', 'Home', today, None)], revenue=10)

    row, = log.all_sites_summary(today.date())

    assert row['visits_evolution'] == 50.0
    assert row['revenue'] == 30
    assert row['revenue_evolution'] == 100.0


def test_bounce_counted():
    log = VisitLog()
    idsite = log.create_site('Blog', 'http://blog.example')
    log.track_visit(idsite, 'v', [('http://blog.example/post', 'Post', datetime(2013, 5, 10), None)])

    row, = log.entry_page_urls(idsite)

    assert row['bounce_count'] == 1
    assert row['bounce_rate'] == '100%'


def test_unknown_site():
    log = VisitLog()

    with pytest.raises(SiteNotFoundError):
        log.get_site(1)

    with pytest.raises(SiteNotFoundError):
        log.track_visit(1, 'v', [('http://x', 'X', datetime(2013, 5, 10), None)])


def test_visit_needs_actions():
    log = VisitLog()
    idsite = log.create_site('Empty', 'http://empty.example')

    with pytest.raises(ValueError):
        log.track_visit(idsite, 'v', [])
