"""Bank and loan-type catalog."""

from loanview.catalog.default import default_catalog
from loanview.catalog.store import Catalog

__all__ = ["Catalog", "default_catalog"]
