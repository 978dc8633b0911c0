"""
Built-in reports over the visit log.
"""

from typing import List

from reports.report import Report


def default_reports() -> List[Report]:
    """Create the built-in report definitions."""
    return [
        Report(
            module='VisitsSummary',
            action='get',
            name='Visits Summary',
            category='Visitors',
            provider=lambda log, idsite, day: log.visits_summary(idsite, day),
            documentation='An overview of the visits to your website.',
            metrics_documentation={
                'nb_visits': 'Number of visits to the website.',
                'nb_uniq_visitors': 'Number of distinct visitors to the website.',
                'nb_actions': 'Number of pages viewed during all visits.',
                'max_actions': 'Highest number of pages viewed in a single visit.',
                'bounce_count': 'Number of visits that viewed a single page.',
            },
            view_properties={
                'show_search': False,
                'show_pagination_control': False,
                'show_offset_information': False,
            },
        ),
        Report(
            module='Actions',
            action='getPageUrls',
            name='Page URLs',
            category='Actions',
            provider=lambda log, idsite, day: log.page_urls(idsite, day),
            documentation='This report shows the page URLs that were visited.',
            metrics_documentation={
                'nb_hits': 'Number of times the page was viewed.',
                'nb_visits': 'Number of visits that included the page.',
                'nb_uniq_visitors': 'Number of distinct visitors that viewed the page.',
            },
            related_reports={
                'Actions.getPageUrls': 'Page URLs',
                'Actions.getPageTitles': 'Page Titles',
                'Actions.getEntryPageUrls': 'Entry pages',
            },
        ),
        Report(
            module='Actions',
            action='getPageTitles',
            name='Page Titles',
            category='Actions',
            provider=lambda log, idsite, day: log.page_titles(idsite, day),
            documentation='This report shows the titles of the pages that were visited.',
            metrics_documentation={
                'nb_hits': 'Number of times the page was viewed.',
                'nb_visits': 'Number of visits that included the page.',
            },
            related_reports={
                'Actions.getPageUrls': 'Page URLs',
            },
        ),
        Report(
            module='Actions',
            action='getEntryPageUrls',
            name='Entry pages',
            category='Actions',
            provider=lambda log, idsite, day: log.entry_page_urls(idsite, day),
            documentation='Pages visits started on.',
            metrics_documentation={
                'entry_nb_visits': 'Number of visits that started on this page.',
                'bounce_rate': 'Percentage of visits that started and ended on this page.',
            },
            related_reports={
                'Actions.getPageUrls': 'Page URLs',
            },
        ),
    ]
