"""
Tests for the request configs and their filter switches.
"""

import pytest

from models.request_config import RequestConfig, VisualizationRequestConfig


def test_request_config_defaults():
    config = RequestConfig()

    assert config.filter_sort_order == 'desc'
    assert config.filter_limit is None
    assert config.filter_offset == 0
    assert config.filter_column == 'label'
    assert config.filter_excludelowpop_value == 0
    assert 'disable_generic_filters' not in config.overridable_properties


def test_request_config_overrides():
    config = RequestConfig()

    config.apply_query_params({
        'filter_limit': '5',
        'filter_offset': '10',
        'filter_sort_column': 'nb_hits',
        'filter_sort_order': 'asc',
        'filter_excludelowpop_value': '2.5',
    })

    assert config.filter_limit == 5
    assert config.filter_offset == 10
    assert config.filter_sort_column == 'nb_hits'
    assert config.filter_sort_order == 'asc'
    assert config.filter_excludelowpop_value == 2.5


def test_api_method_to_request():
    config = RequestConfig(api_method_to_request_data='Actions.getPageUrls')

    assert config.get_api_module_to_request() == 'Actions'
    assert config.get_api_method_to_request() == 'getPageUrls'


def test_visualization_request_config_registers_switches():
    config = VisualizationRequestConfig()

    assert 'disable_generic_filters' in config.overridable_properties
    assert 'disable_queued_filters' in config.overridable_properties
    assert 'filter_limit' in config.overridable_properties


@pytest.mark.parametrize('param, field, expected', [
    ('1', False, True),
    ('1.0', False, True),
    (1, False, True),
    ('0', True, True),
    (None, True, True),
    ('0', False, False),
    (None, False, False),
    ('yes', False, False),
    ('2', False, False),
])
def test_generic_filters_disabled(param, field, expected):
    config = VisualizationRequestConfig(disable_generic_filters=field)
    params = {} if param is None else {'disable_generic_filters': param}

    assert config.are_generic_filters_disabled(params) is expected


def test_generic_filters_without_request_params():
    assert VisualizationRequestConfig().are_generic_filters_disabled() is False


def test_queued_filters_ignore_request_params():
    config = VisualizationRequestConfig()

    # only the property counts, unlike generic filters
    assert config.are_queued_filters_disabled() is False

    config.disable_queued_filters = True
    assert config.are_queued_filters_disabled() is True


def test_switches_settable_through_query():
    config = VisualizationRequestConfig()

    config.apply_query_params({'disable_queued_filters': '1', 'disable_generic_filters': 'true'})

    assert config.are_queued_filters_disabled() is True
    assert config.are_generic_filters_disabled({}) is True
