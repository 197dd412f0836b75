"""Custom exception hierarchy for loanview."""


class LoanViewError(Exception):
    """Base exception for all loanview errors."""


class InvalidInputError(LoanViewError):
    """Raised when loan parameters are outside the valid domain."""


class MissingCatalogEntryError(LoanViewError):
    """Raised when a referenced bank or loan type does not exist."""


class ConfigurationError(LoanViewError):
    """Raised when configuration or catalog data is invalid."""


class SinkError(LoanViewError):
    """Raised when a document sink cannot write its output."""
