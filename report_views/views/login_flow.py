"""
Login flow - interaction model of the login screen.
Switches between the login and password reset forms and submits
password reset requests asynchronously.
"""

import re
from dataclasses import dataclass, field as dataclass_field
from typing import Dict, List, Optional

import httpx

from utils.logger import logger


LOGIN_FORM = 'login_form'
BEGIN_RESET_FORM = 'begin_reset_form'
RESET_FORM = 'reset_form'

MESSAGE_CONTAINER = 'message_container'
ALTERNATE_RESET_NAV = 'alternate_reset_nav'

HTTP_ERROR_MESSAGE = '<div id="login_error"><strong>HTTP Error</strong></div>'

_MESSAGE_ERROR = re.compile(r'class\s*=\s*["\'][^"\']*\bmessage_error\b')


@dataclass
class FormTransition:
    """Visible effects of switching from one form to another."""

    from_form: str
    to_form: str
    message: str
    fade_out: List[str]
    fade_in: List[str]
    hidden_nav: str
    shown_nav: str
    focus: str


@dataclass
class ResetOutcome:
    """Result of a password reset submission."""

    success: bool
    message: str
    fade_out: List[str] = dataclass_field(default_factory=list)
    transport_error: Optional[str] = None


class LoginFlow:
    """
    Login screen state.

    Input values are keyed by element id, e.g. 'login_form_login' or
    'begin_reset_form_password'.
    """

    def __init__(self, lost_password_instructions: str = '', reset_url: str = '/login/reset-password'):
        self.lost_password_instructions = lost_password_instructions
        self.reset_url = reset_url

        self.current_form = LOGIN_FORM
        self.inputs: Dict[str, str] = {}
        self.message = ''
        self.focus = f"{LOGIN_FORM}_login"
        self.visible_navs = {f"{LOGIN_FORM}_nav"}
        self.alternate_nav_visible = False
        self.loading = False

    def set_input(self, element_id: str, value: str):
        self.inputs[element_id] = value

    def get_input(self, element_id: str) -> str:
        return self.inputs.get(element_id, '')

    def switch_form(self, from_form: str, to_form: str, message: str) -> FormTransition:
        """
        Hide one form and show another.

        The login typed in the source form is carried over when the target
        login input is empty. Focus lands on the target login input if it is
        still empty, else on the target password input.

        Args:
            from_form: Id of the form being hidden
            to_form: Id of the form being shown
            message: HTML placed in the message container

        Returns:
            FormTransition describing the change
        """
        to_login = f"{to_form}_login"
        if self.get_input(to_login) == '':
            self.set_input(to_login, self.get_input(f"{from_form}_login"))

        self.message = message
        self.visible_navs.discard(f"{from_form}_nav")
        self.visible_navs.add(f"{to_form}_nav")

        if self.get_input(to_login) == '':
            self.focus = to_login
        else:
            self.focus = f"{to_form}_password"

        self.current_form = to_form
        logger.debug(f"Login screen: {from_form} -> {to_form}")

        return FormTransition(
            from_form=from_form,
            to_form=to_form,
            message=message,
            fade_out=[from_form, MESSAGE_CONTAINER],
            fade_in=[to_form, MESSAGE_CONTAINER],
            hidden_nav=f"{from_form}_nav",
            shown_nav=f"{to_form}_nav",
            focus=self.focus,
        )

    def lost_password(self) -> FormTransition:
        """'Lost your password?' link."""
        return self.switch_form(LOGIN_FORM, BEGIN_RESET_FORM, self.lost_password_instructions)

    def cancel(self) -> FormTransition:
        """'Cancel' link of the reset form, or the link shown after a reset."""
        self.alternate_nav_visible = False
        return self.switch_form(RESET_FORM, LOGIN_FORM, '')

    def get_reset_form_data(self) -> Dict[str, str]:
        """Serialize the begin reset form."""
        prefix = f"{BEGIN_RESET_FORM}_"
        return {
            f"form_{element_id[len(prefix):]}": value
            for element_id, value in self.inputs.items()
            if element_id.startswith(prefix)
        }

    async def submit_reset(self, client: httpx.AsyncClient) -> ResetOutcome:
        """
        Post the begin reset form and show the server response.

        Transport failures and error statuses show a generic 'HTTP Error'
        message. There is no retry.

        Args:
            client: HTTP client used for the request

        Returns:
            ResetOutcome with the message now displayed
        """
        self.loading = True
        transport_error = None
        try:
            response = await client.post(self.reset_url, data=self.get_reset_form_data())
            response.raise_for_status()
            body = response.text
        except httpx.HTTPError as e:
            logger.warning(f"Password reset request failed: {e}")
            transport_error = str(e)
            body = HTTP_ERROR_MESSAGE
        finally:
            self.loading = False

        return self._reset_done(body, transport_error)

    def _reset_done(self, response: str, transport_error: Optional[str] = None) -> ResetOutcome:
        is_success = _MESSAGE_ERROR.search(response) is None and transport_error is None

        fade_out = [MESSAGE_CONTAINER]
        if is_success:
            fade_out += [BEGIN_RESET_FORM, f"{BEGIN_RESET_FORM}_nav"]
            self.visible_navs.discard(f"{BEGIN_RESET_FORM}_nav")
            self.alternate_nav_visible = True

        self.message = response
        return ResetOutcome(
            success=is_success,
            message=response,
            fade_out=fade_out,
            transport_error=transport_error,
        )
