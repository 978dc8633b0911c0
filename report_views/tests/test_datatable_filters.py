"""
Tests for the named DataTable filters.
"""

import pytest

from models.errors import InvalidFilterError
from views.datatable_filters import (
    add_column,
    delete_columns,
    exclude_low_population_rows,
    limit_rows,
    pattern_rows,
    run_filter,
    sort_rows,
)


@pytest.fixture
def rows():
    return [
        {'label': 'home', 'nb_hits': 10, 'bounce_rate': '45%'},
        {'label': 'About', 'nb_hits': 3, 'bounce_rate': '5%'},
        {'label': 'blog', 'nb_hits': 10, 'bounce_rate': '100%'},
        {'label': 'contact', 'nb_hits': 1, 'bounce_rate': '0%'},
    ]


def test_sort_desc_keeps_ties_in_order(rows):
    sorted_rows = sort_rows(rows, 'nb_hits')

    assert [row['label'] for row in sorted_rows] == ['home', 'blog', 'About', 'contact']


def test_sort_asc(rows):
    sorted_rows = sort_rows(rows, 'nb_hits', 'asc')

    assert [row['label'] for row in sorted_rows] == ['contact', 'About', 'home', 'blog']


def test_sort_percentages_numerically(rows):
    sorted_rows = sort_rows(rows, 'bounce_rate')

    assert [row['bounce_rate'] for row in sorted_rows] == ['100%', '45%', '5%', '0%']


def test_sort_text_case_insensitive(rows):
    sorted_rows = sort_rows(rows, 'label', 'asc')

    assert [row['label'] for row in sorted_rows] == ['About', 'blog', 'contact', 'home']


def test_sort_without_column(rows):
    assert sort_rows(rows, '') == rows


@pytest.mark.parametrize('offset, limit, expected', [
    (0, 2, ['home', 'About']),
    (1, 2, ['About', 'blog']),
    (2, None, ['blog', 'contact']),
    (3, -1, ['contact']),
    (10, 5, []),
])
def test_limit(rows, offset, limit, expected):
    assert [row['label'] for row in limit_rows(rows, offset, limit)] == expected


def test_pattern(rows):
    assert [row['label'] for row in pattern_rows(rows, 'label', '^[ab]')] == ['About', 'blog']


def test_invalid_pattern_matched_literally():
    rows = [{'label': 'a(b'}, {'label': 'ab'}]

    assert pattern_rows(rows, 'label', 'a(') == [{'label': 'a(b'}]


def test_exclude_low_population_with_minimum(rows):
    kept = exclude_low_population_rows(rows, 'nb_hits', 3)

    assert [row['label'] for row in kept] == ['home', 'About', 'blog']


def test_exclude_low_population_default_minimum():
    rows = [{'label': 'big', 'nb': 99}, {'label': 'small', 'nb': 1}]

    # 2% of 100
    assert exclude_low_population_rows(rows, 'nb') == [{'label': 'big', 'nb': 99}]


def test_delete_columns(rows):
    result = delete_columns(rows, 'nb_hits, bounce_rate')

    assert result[0] == {'label': 'home'}
    assert 'nb_hits' in rows[0]


def test_add_column(rows):
    result = add_column(rows, 'double', lambda row: row['nb_hits'] * 2)

    assert [row['double'] for row in result] == [20, 6, 20, 2]


def test_run_filter_by_name(rows):
    assert len(run_filter(rows, 'Limit', [0, 1])) == 1


def test_run_filter_callable(rows):
    def keep_first(rows, count):
        return rows[:count]

    assert run_filter(rows, keep_first, [3]) == rows[:3]


def test_run_filter_unknown_name(rows):
    with pytest.raises(InvalidFilterError):
        run_filter(rows, 'Truncate', [])
