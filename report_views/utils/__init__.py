"""Utility functions for Report Views."""

from .logger import logger, ReportLogger
from .security import get_password_hash, verify_password, generate_reset_token, tokens_match
from .urls import get_base_report_url

__all__ = [
    'logger',
    'ReportLogger',
    'get_password_hash',
    'verify_password',
    'generate_reset_token',
    'tokens_match',
    'get_base_report_url',
]
