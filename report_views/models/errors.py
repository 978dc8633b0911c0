"""
Exception types raised by report views.
"""


class ReportViewError(Exception):
    """Base class for report view errors."""


class InvalidFilterError(ReportViewError, TypeError):
    """A filter entry is neither a named filter nor a callable."""


class InvalidQueryParameterError(ReportViewError, ValueError):
    """A query parameter cannot be coerced to the property's type."""

    def __init__(self, name: str, value, expected: str):
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid value {value!r} for '{name}': expected {expected}")


class ReportNotFoundError(ReportViewError, LookupError):
    """No report is registered for a module/action pair."""

    def __init__(self, module: str, action: str):
        self.module = module
        self.action = action
        super().__init__(f"Report '{module}.{action}' is not registered")


class SiteNotFoundError(ReportViewError, LookupError):
    """No site exists for an id."""

    def __init__(self, idsite: int):
        self.idsite = idsite
        super().__init__(f"Site {idsite} does not exist")
