"""
Translation tables for report columns and login messages.
Provides message lookup keyed by translation identifiers.
"""

from typing import Dict


class Translations:
    """English message catalog."""

    # Login & general messages
    MESSAGES = {
        'General_Required': '%s is required',
        'General_Username': 'Username',
        'General_Password': 'Password',
        'Login_PasswordRepeat': 'Password (repeat)',
        'Login_PasswordsDoNotMatch': 'The passwords you entered do not match.',
        'Login_InvalidUsernameEmail': 'Invalid username and/or e-mail address',
        'Login_PasswordResetAlreadySent': (
            'You have recently requested a password reset. '
            'An email with a confirmation link was sent.'
        ),
        'Login_PasswordChanged': 'Your password has been changed.',
        'Login_InvalidOrExpiredToken': 'Token is invalid or has expired.',
        'Login_ConfirmationLinkSent': (
            'A confirmation link has been sent to your inbox. '
            'Check your e-mail and visit this link to authorize your password change request.'
        ),
    }

    # Column name => label for raw metrics
    DEFAULT_METRICS = {
        'nb_visits': 'Visits',
        'nb_uniq_visitors': 'Unique visitors',
        'nb_actions': 'Actions',
        'nb_hits': 'Pageviews',
        'max_actions': 'Maximum actions in one visit',
        'bounce_count': 'Bounces',
        'entry_nb_visits': 'Entrances',
        'revenue': 'Revenue',
    }

    # Column name => label for processed metrics
    DEFAULT_PROCESSED_METRICS = {
        'label': 'Label',
        'nb_actions_per_visit': 'Actions per Visit',
        'bounce_rate': 'Bounce Rate',
        'conversion_rate': 'Conversion Rate',
    }

    @classmethod
    def translate(cls, key: str, *args) -> str:
        """
        Look up a message and format it with positional arguments.

        Unknown keys are returned unchanged so missing entries stay visible.

        Args:
            key: Translation identifier, e.g. 'General_Required'
            *args: Values substituted into '%s' placeholders

        Returns:
            Translated text
        """
        message = cls.MESSAGES.get(key, key)
        if args:
            return message % args
        return message

    @classmethod
    def get_default_metric_translations(cls) -> Dict[str, str]:
        """Get raw and processed metric translations merged."""
        translations = dict(cls.DEFAULT_METRICS)
        translations.update(cls.DEFAULT_PROCESSED_METRICS)
        return translations
