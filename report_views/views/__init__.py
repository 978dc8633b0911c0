"""Views package for Report Views."""

from .datatable_filters import FILTERS, run_filter
from .view_datatable import ViewDataTable
from .login_flow import LoginFlow, FormTransition, ResetOutcome

__all__ = ['FILTERS', 'run_filter', 'ViewDataTable', 'LoginFlow', 'FormTransition', 'ResetOutcome']
