"""Synthetic sample data generators."""

from loanview.generators.applicant import ApplicantGenerator

__all__ = ["ApplicantGenerator"]
