"""
Tests for the login screen flow.
"""

import httpx
import pytest

from views.login_flow import (
    BEGIN_RESET_FORM,
    HTTP_ERROR_MESSAGE,
    LOGIN_FORM,
    MESSAGE_CONTAINER,
    RESET_FORM,
    LoginFlow,
)


def test_initial_state():
    flow = LoginFlow()

    assert flow.current_form == LOGIN_FORM
    assert flow.focus == 'login_form_login'
    assert flow.visible_navs == {'login_form_nav'}
    assert flow.alternate_nav_visible is False


def test_lost_password_carries_login_over():
    flow = LoginFlow(lost_password_instructions='Enter your login')
    flow.set_input('login_form_login', 'superUserLogin')

    transition = flow.lost_password()

    assert flow.get_input('begin_reset_form_login') == 'superUserLogin'
    assert transition.from_form == LOGIN_FORM
    assert transition.to_form == BEGIN_RESET_FORM
    assert transition.message == 'Enter your login'
    assert transition.fade_out == [LOGIN_FORM, MESSAGE_CONTAINER]
    assert transition.fade_in == [BEGIN_RESET_FORM, MESSAGE_CONTAINER]
    assert transition.hidden_nav == 'login_form_nav'
    assert transition.shown_nav == 'begin_reset_form_nav'
    assert transition.focus == 'begin_reset_form_password'
    assert flow.visible_navs == {'begin_reset_form_nav'}
    assert flow.current_form == BEGIN_RESET_FORM


def test_lost_password_focuses_empty_login():
    flow = LoginFlow()

    transition = flow.lost_password()

    assert transition.focus == 'begin_reset_form_login'


def test_target_login_not_overwritten():
    flow = LoginFlow()
    flow.set_input('login_form_login', 'viewer')
    flow.set_input('begin_reset_form_login', 'typed-before')

    flow.lost_password()

    assert flow.get_input('begin_reset_form_login') == 'typed-before'


def test_cancel_returns_to_login_form():
    flow = LoginFlow()
    flow.alternate_nav_visible = True
    flow.set_input('reset_form_login', 'viewer')

    transition = flow.cancel()

    assert flow.alternate_nav_visible is False
    assert transition.from_form == RESET_FORM
    assert transition.to_form == LOGIN_FORM
    assert transition.message == ''
    assert flow.get_input('login_form_login') == 'viewer'
    assert transition.focus == 'login_form_password'


def test_reset_form_data():
    flow = LoginFlow()
    flow.set_input('login_form_login', 'ignored')
    flow.set_input('begin_reset_form_login', 'viewer')
    flow.set_input('begin_reset_form_nonce', 'abc')

    assert flow.get_reset_form_data() == {'form_login': 'viewer', 'form_nonce': 'abc'}


@pytest.mark.asyncio
async def test_submit_reset_success(client):
    flow = LoginFlow()
    flow.set_input('begin_reset_form_login', 'superUserLogin')

    outcome = await flow.submit_reset(client)

    assert outcome.success is True
    assert outcome.message.startswith('<p class="message">')
    assert outcome.fade_out == [MESSAGE_CONTAINER, BEGIN_RESET_FORM, 'begin_reset_form_nav']
    assert outcome.transport_error is None
    assert flow.alternate_nav_visible is True
    assert 'begin_reset_form_nav' not in flow.visible_navs
    assert flow.message == outcome.message
    assert flow.loading is False


@pytest.mark.asyncio
async def test_submit_reset_unknown_login(client):
    flow = LoginFlow()
    flow.set_input('begin_reset_form_login', 'nobody')

    outcome = await flow.submit_reset(client)

    assert outcome.success is False
    assert 'message_error' in outcome.message
    assert 'Invalid username and/or e-mail address' in outcome.message
    assert outcome.fade_out == [MESSAGE_CONTAINER]
    assert flow.alternate_nav_visible is False


@pytest.mark.asyncio
async def test_submit_reset_missing_login(client):
    flow = LoginFlow()

    outcome = await flow.submit_reset(client)

    assert outcome.success is False
    assert 'Username is required' in outcome.message


@pytest.mark.asyncio
async def test_submit_reset_transport_error():
    def handler(request):
        raise httpx.ConnectError('connection refused', request=request)

    flow = LoginFlow()
    flow.set_input('begin_reset_form_login', 'viewer')

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url='http://test') as ac:
        outcome = await flow.submit_reset(ac)

    assert outcome.success is False
    assert outcome.message == HTTP_ERROR_MESSAGE
    assert outcome.transport_error == 'connection refused'
    assert flow.message == HTTP_ERROR_MESSAGE
    assert flow.alternate_nav_visible is False
    assert flow.loading is False


@pytest.mark.asyncio
async def test_submit_reset_error_status():
    def handler(request):
        return httpx.Response(500, text='<p class="message">ok?</p>')

    flow = LoginFlow()

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url='http://test') as ac:
        outcome = await flow.submit_reset(ac)

    assert outcome.success is False
    assert outcome.message == HTTP_ERROR_MESSAGE
