"""Synthetic loan applicants for demo and test reports."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from loanview.catalog.store import Catalog
from loanview.generators.base import BaseGenerator
from loanview.models.application import ApplicationData, LoanRequirement, PersonalDetails
from loanview.report.formatting import format_currency


class ApplicantGenerator(BaseGenerator):
    """Generate synthetic loan applications against a catalog."""

    GENDERS = ["Male", "Female"]
    MARITAL_STATUS = ["Single", "Married", "Divorced", "Widowed"]
    MARITAL_WEIGHTS = [0.35, 0.55, 0.05, 0.05]

    PURPOSES = {
        "home": ["Purchase of a flat", "Construction of a house", "Home renovation"],
        "personal": ["Medical expenses", "Wedding expenses", "Debt consolidation"],
        "education": ["Postgraduate studies", "Undergraduate tuition", "Study abroad"],
        "vehicle": ["Purchase of a new car", "Purchase of a two-wheeler"],
        "business": ["Working capital", "Equipment purchase", "Business expansion"],
        "gold": ["Short-term liquidity", "Agricultural expenses"],
    }

    def __init__(self, catalog: Catalog, seed: int | None = None) -> None:
        super().__init__(seed)
        self.catalog = catalog

    def generate(self, loan_type_id: str | None = None) -> ApplicationData:
        """Generate a single application.

        Parameters
        ----------
        loan_type_id : str | None
            Loan type to apply for; a random catalog loan type if omitted.

        Returns
        -------
        ApplicationData
            Generated application.
        """
        return self._generate_one(loan_type_id)

    def generate_batch(self, count: int) -> Iterator[ApplicationData]:
        """Generate multiple applications for random loan types.

        Yields
        ------
        ApplicationData
            Generated applications.
        """
        for _ in range(count):
            yield self._generate_one(None)

    def _generate_one(self, loan_type_id: str | None) -> ApplicationData:
        if loan_type_id is None:
            loan_type = random.choice(self.catalog.loan_types)
        else:
            loan_type = self.catalog.get_loan_type(loan_type_id)

        gender = random.choice(self.GENDERS)
        full_name = self.fake.name_male() if gender == "Male" else self.fake.name_female()
        marital_status = random.choices(self.MARITAL_STATUS, weights=self.MARITAL_WEIGHTS, k=1)[0]
        current_address = self._single_line_address()
        # Most applicants live at their permanent address
        permanent_address = current_address if random.random() < 0.7 else self._single_line_address()

        # Round requested amounts to the nearest 10,000
        max_steps = max(1, int(loan_type.max_amount / 10_000))
        amount = Decimal(random.randint(max(1, max_steps // 20), max_steps) * 10_000)
        tenure = random.randint(loan_type.min_tenure_months, loan_type.max_tenure_months)

        personal = PersonalDetails(
            full_name=full_name,
            father_husband_name=self.fake.name_male(),
            dob=self.fake.date_of_birth(minimum_age=21, maximum_age=60).isoformat(),
            gender=gender,
            marital_status=marital_status,
            phone=self.fake.phone_number(),
            email=self.fake.email(),
            id_number=self.fake.bothify("?????####?").upper(),  # PAN layout
            current_address=current_address,
            permanent_address=permanent_address,
        )

        requirement = LoanRequirement(
            purpose=random.choice(self.PURPOSES.get(loan_type.loan_type_id, ["General purpose"])),
            amount=format_currency(amount, decimals=0),
            repayment_period=f"{tenure} months",
            loan_type=loan_type.loan_type_id,
        )

        return ApplicationData(personal_details=personal, loan_requirement=requirement)

    def _single_line_address(self) -> str:
        return ", ".join(line.strip() for line in self.fake.address().splitlines() if line.strip())
