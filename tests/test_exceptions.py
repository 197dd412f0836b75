"""Tests for custom exception hierarchy."""

from loanview.exceptions import (
    ConfigurationError,
    InvalidInputError,
    LoanViewError,
    MissingCatalogEntryError,
    SinkError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_loanview_error_is_exception(self) -> None:
        assert isinstance(LoanViewError("test"), Exception)

    def test_invalid_input_is_loanview_error(self) -> None:
        assert isinstance(InvalidInputError("test"), LoanViewError)

    def test_missing_catalog_entry_is_loanview_error(self) -> None:
        assert isinstance(MissingCatalogEntryError("test"), LoanViewError)

    def test_configuration_error_is_loanview_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LoanViewError)

    def test_sink_error_is_loanview_error(self) -> None:
        assert isinstance(SinkError("test"), LoanViewError)

    def test_exception_message(self) -> None:
        err = MissingCatalogEntryError("Loan type crypto not found")
        assert str(err) == "Loan type crypto not found"
