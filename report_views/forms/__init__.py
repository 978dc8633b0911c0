"""Forms package for Report Views."""

from .element import FormElement
from .form import Form
from .login_forms import FormLogin, FormResetPassword, FormSetNewPassword
from .rules import Rule, RequiredRule, EqualsRule

__all__ = [
    'FormElement',
    'Form',
    'FormLogin',
    'FormResetPassword',
    'FormSetNewPassword',
    'Rule',
    'RequiredRule',
    'EqualsRule',
]
