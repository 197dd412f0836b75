"""Loan application models."""

from dataclasses import dataclass, field


@dataclass
class PersonalDetails:
    """Applicant identity and contact details as entered on the form."""

    full_name: str = ""
    father_husband_name: str = ""
    dob: str = ""
    gender: str = ""
    marital_status: str = ""
    phone: str = ""
    email: str = ""
    id_number: str = ""
    current_address: str = ""
    permanent_address: str = ""


@dataclass
class LoanRequirement:
    """What the applicant asked for."""

    purpose: str = ""
    amount: str = ""
    repayment_period: str = ""
    loan_type: str = ""  # Loan type id (e.g., "home")


@dataclass
class ApplicationData:
    """A submitted loan application."""

    personal_details: PersonalDetails = field(default_factory=PersonalDetails)
    loan_requirement: LoanRequirement = field(default_factory=LoanRequirement)
