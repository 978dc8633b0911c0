"""
Tests for the login forms.
"""

from forms.element import FormElement
from forms.login_forms import FormLogin, FormResetPassword, FormSetNewPassword
from forms.rules import EqualsRule, RequiredRule

import pytest


def test_reset_password_form_declaration():
    form = FormResetPassword()

    assert form.form_id == 'resetpasswordform'
    assert form.method == 'post'
    assert [(e.element_type, e.name) for e in form.elements] == [
        ('text', 'form_login'),
        ('hidden', 'form_nonce'),
        ('submit', 'submit'),
    ]


def test_reset_password_requires_login():
    form = FormResetPassword()

    assert form.validate({'form_nonce': 'abc'}) is False
    assert form.errors == {'form_login': 'Username is required'}


def test_reset_password_rejects_blank_login():
    form = FormResetPassword()

    assert form.validate({'form_login': '   '}) is False


def test_reset_password_accepts_login():
    form = FormResetPassword()

    assert form.validate({'form_login': 'superUserLogin', 'form_nonce': 'abc'}) is True
    assert form.errors == {}
    assert form.get_submit_value('form_login') == 'superUserLogin'


def test_set_new_password_mismatch():
    form = FormSetNewPassword()

    valid = form.validate({'form_password': 'secret1', 'form_password_bis': 'secret2'})

    assert valid is False
    assert form.errors == {'form_password_bis': 'The passwords you entered do not match.'}


def test_set_new_password_required_fields():
    form = FormSetNewPassword()

    assert form.validate({}) is False
    # the first failing rule of each element is reported
    assert form.get_error_messages() == [
        'Password is required',
        'Password (repeat) is required',
    ]


def test_set_new_password_success():
    form = FormSetNewPassword()

    assert form.validate({
        'form_password': 'secret',
        'form_password_bis': 'secret',
        'form_rememberme': '1',
    }) is True
    assert form.get_submit_value('form_rememberme') is True


def test_checkbox_unchecked():
    form = FormLogin()

    assert form.validate({'form_login': 'viewer', 'form_password': 'pw'}) is True
    assert form.get_submit_value('form_rememberme') is False


def test_login_form_requires_both_fields():
    form = FormLogin()

    assert form.validate({'form_login': 'viewer'}) is False
    assert list(form.errors) == ['form_password']


def test_element_rules():
    password = FormElement('password', 'pw')
    repeat = FormElement('password', 'pw_bis')
    repeat.add_rule('required', 'required!').add_rule('eq', 'differs!', password)

    assert repeat.rules == [RequiredRule('required!'), EqualsRule('differs!', 'pw')]
    assert repeat.validate({'pw': 'a', 'pw_bis': 'a'}) is None
    assert repeat.validate({'pw': 'a', 'pw_bis': 'b'}) == 'differs!'
    assert repeat.validate({'pw': 'a'}) == 'required!'


def test_element_rejects_unknown_rules():
    element = FormElement('text', 'name')

    with pytest.raises(ValueError):
        element.add_rule('regex', 'no')

    with pytest.raises(ValueError):
        element.add_rule('eq', 'needs other')
