"""
Login forms - sign in, password reset request and new password.
"""

from config.translations import Translations
from forms.form import Form


_ = Translations.translate


class FormLogin(Form):
    """Sign in form."""

    def __init__(self, form_id: str = 'login_form', method: str = 'post'):
        super().__init__(form_id, method)

    def init(self):
        self.add_element('text', 'form_login') \
            .add_rule('required', _('General_Required', _('General_Username')))

        self.add_element('password', 'form_password') \
            .add_rule('required', _('General_Required', _('General_Password')))

        self.add_element('checkbox', 'form_rememberme')
        self.add_element('hidden', 'form_nonce')
        self.add_element('submit', 'submit')


class FormResetPassword(Form):
    """Form asking for the login whose password must be reset."""

    def __init__(self, form_id: str = 'resetpasswordform', method: str = 'post'):
        super().__init__(form_id, method)

    def init(self):
        self.add_element('text', 'form_login') \
            .add_rule('required', _('General_Required', _('General_Username')))

        self.add_element('hidden', 'form_nonce')
        self.add_element('submit', 'submit')


class FormSetNewPassword(Form):
    """Form letting users set their password after requesting a reset."""

    def __init__(self, form_id: str = 'setnewpasswordform', method: str = 'post'):
        super().__init__(form_id, method)

    def init(self):
        password = self.add_element('password', 'form_password')
        password.add_rule('required', _('General_Required', _('General_Password')))

        password_bis = self.add_element('password', 'form_password_bis')
        password_bis.add_rule('required', _('General_Required', _('Login_PasswordRepeat')))
        password_bis.add_rule('eq', _('Login_PasswordsDoNotMatch'), password)

        self.add_element('checkbox', 'form_rememberme')
        self.add_element('hidden', 'form_nonce')
        self.add_element('submit', 'submit')
