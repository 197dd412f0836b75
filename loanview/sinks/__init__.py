"""Document sinks for rendering reports."""

from loanview.sinks.base import DocumentSink
from loanview.sinks.pdf import PdfSink
from loanview.sinks.recording import RecordingSink

__all__ = ["DocumentSink", "PdfSink", "RecordingSink"]
