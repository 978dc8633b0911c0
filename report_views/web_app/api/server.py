from datetime import date
from html import escape
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from config.settings import Settings
from config.translations import Translations
from forms.login_forms import FormResetPassword, FormSetNewPassword
from models.errors import InvalidQueryParameterError, ReportNotFoundError, SiteNotFoundError
from models.site_summary import SiteSummaryRow
from reports.registry import ReportRegistry, report_registry
from reports.visit_log import VisitLog
from utils.logger import logger
from utils.security import generate_reset_token, get_password_hash, tokens_match
from views.view_datatable import ViewDataTable


class ReportResponse(BaseModel):
    report_id: str
    title: str
    documentation: Optional[str] = None
    metrics_documentation: Dict[str, str] = {}
    columns: List[str]
    column_translations: Dict[str, str]
    rows: List[Dict[str, Any]]
    total_rows: int
    offset: int = 0
    limit: Optional[int] = None
    self_url: str = ''
    related_reports: Dict[str, str] = {}
    properties: Dict[str, Any] = {}


class SiteSummaryResponse(BaseModel):
    idsite: int
    visits: int
    pageviews: int
    revenue: float
    name: str
    url: str
    visits_summary_value: float
    pageviews_summary_value: float
    revenue_summary_value: float


def _message(text: str) -> str:
    return f'<p class="message">{escape(text)}</p>'


def _error_message(messages: List[str]) -> str:
    items = '<br />'.join(escape(message) for message in messages)
    return f'<div class="message_error">{items}</div>'


async def _read_form(request: Request) -> Dict[str, Any]:
    form = await request.form()
    return dict(form.items())


def _resolve_login(users: Dict[str, str], login_or_email: str) -> Optional[str]:
    """Find the login of a user given its login or e-mail address."""
    if login_or_email in users:
        return login_or_email
    for login, email in users.items():
        if email.lower() == login_or_email.lower():
            return login
    return None


def create_app(visit_log: Optional[VisitLog] = None,
               users: Optional[Dict[str, str]] = None,
               registry: Optional[ReportRegistry] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        visit_log: Data source of the reports
        users: Login => e-mail of the known users
        registry: Report definitions; defaults to the global registry

    Returns:
        FastAPI application
    """
    app = FastAPI(title="Report Views")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins for dev simplicity
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.visit_log = visit_log if visit_log is not None else VisitLog()
    app.state.users = dict(users or {})
    app.state.registry = registry if registry is not None else report_registry
    # login => reset token
    app.state.pending_resets = {}
    # login => bcrypt hash
    app.state.password_hashes = {}

    @app.get("/reports")
    async def list_reports():
        return app.state.registry.get_metadata()

    @app.get("/widget/{module}/{action}", response_model=ReportResponse)
    async def render_widget(module: str, action: str, request: Request):
        params = dict(request.query_params)
        try:
            view = ViewDataTable(module, action, params, app.state.visit_log, app.state.registry)
            return view.render()
        except (ReportNotFoundError, SiteNotFoundError) as e:
            raise HTTPException(status_code=404, detail=str(e))
        except InvalidQueryParameterError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app.get("/multisites", response_model=List[SiteSummaryResponse])
    async def all_websites(day: Optional[str] = Query(None, alias="date")):
        try:
            target_day = date.fromisoformat(day) if day else date.today()
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid date: {day}")

        rows = app.state.visit_log.all_sites_summary(target_day)
        return [
            SiteSummaryRow.from_values(
                idsite=row['idsite'],
                visits=row['nb_visits'],
                pageviews=row['nb_pageviews'],
                revenue=row['revenue'],
                name=row['label'],
                url=row['main_url'],
                visits_summary_value=row['visits_evolution'],
                pageviews_summary_value=row['pageviews_evolution'],
                revenue_summary_value=row['revenue_evolution'],
            ).to_dict()
            for row in rows
        ]

    @app.post("/login/reset-password", response_class=HTMLResponse)
    async def reset_password(request: Request):
        form = FormResetPassword()
        if not form.validate(await _read_form(request)):
            return _error_message(form.get_error_messages())

        login_or_email = form.get_submit_value('form_login').strip()
        login = _resolve_login(app.state.users, login_or_email)
        if login is None:
            logger.warning(f"Password reset requested for unknown login '{login_or_email}'")
            return _error_message([Translations.translate('Login_InvalidUsernameEmail')])

        if login in app.state.pending_resets:
            return _error_message([Translations.translate('Login_PasswordResetAlreadySent')])

        # the token is what the confirmation link carries
        app.state.pending_resets[login] = generate_reset_token()
        logger.info(f"Password reset requested for '{login}'")
        return _message(Translations.translate('Login_ConfirmationLinkSent'))

    @app.post("/login/set-new-password", response_class=HTMLResponse)
    async def set_new_password(request: Request, login: str = '', token: str = ''):
        form = FormSetNewPassword()
        if not form.validate(await _read_form(request)):
            return _error_message(form.get_error_messages())

        expected = app.state.pending_resets.get(login)
        if expected is None or not tokens_match(expected, token):
            logger.warning(f"Invalid password reset token for '{login}'")
            return _error_message([Translations.translate('Login_InvalidOrExpiredToken')])

        app.state.password_hashes[login] = get_password_hash(form.get_submit_value('form_password'))
        del app.state.pending_resets[login]
        logger.info(f"Password changed for '{login}'")
        return _message(Translations.translate('Login_PasswordChanged'))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=Settings.SERVER_HOST, port=Settings.SERVER_PORT)
