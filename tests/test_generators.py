"""Tests for the synthetic applicant generator."""

import re

import pytest

from loanview.catalog import Catalog
from loanview.exceptions import MissingCatalogEntryError
from loanview.generators import ApplicantGenerator


class TestApplicantGenerator:
    """Tests for ApplicantGenerator."""

    def test_generate_application(self, catalog: Catalog, seed: int) -> None:
        application = ApplicantGenerator(catalog, seed=seed).generate("home")
        personal = application.personal_details
        requirement = application.loan_requirement

        assert personal.full_name
        assert personal.gender in ApplicantGenerator.GENDERS
        assert personal.marital_status in ApplicantGenerator.MARITAL_STATUS
        assert re.fullmatch(r"[A-Z]{5}\d{4}[A-Z]", personal.id_number)
        assert "\n" not in personal.current_address
        assert requirement.loan_type == "home"
        assert requirement.purpose in ApplicantGenerator.PURPOSES["home"]
        assert requirement.amount.startswith("INR ")
        assert requirement.repayment_period.endswith(" months")

    def test_amount_and_tenure_within_loan_type(self, catalog: Catalog, seed: int) -> None:
        gen = ApplicantGenerator(catalog, seed=seed)
        gold = catalog.get_loan_type("gold")

        for _ in range(20):
            requirement = gen.generate("gold").loan_requirement
            amount = int(requirement.amount.removeprefix("INR ").replace(",", ""))
            tenure = int(requirement.repayment_period.split()[0])
            assert amount % 10_000 == 0
            assert 0 < amount <= gold.max_amount
            assert gold.min_tenure_months <= tenure <= gold.max_tenure_months

    def test_seed_reproducible(self, catalog: Catalog, seed: int) -> None:
        first = ApplicantGenerator(catalog, seed=seed).generate()
        second = ApplicantGenerator(catalog, seed=seed).generate()

        assert first == second

    def test_generate_batch(self, catalog: Catalog, seed: int) -> None:
        applications = list(ApplicantGenerator(catalog, seed=seed).generate_batch(5))
        known = {lt.loan_type_id for lt in catalog.loan_types}

        assert len(applications) == 5
        assert all(a.loan_requirement.loan_type in known for a in applications)

    def test_unknown_loan_type(self, catalog: Catalog) -> None:
        with pytest.raises(MissingCatalogEntryError):
            ApplicantGenerator(catalog).generate("crypto")
