"""Report assembly: loan figures and market data laid out as report sections."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from loanview.catalog.store import Catalog
from loanview.config import LoanViewConfig
from loanview.engine import calculate_loan_details, generate_amortization_schedule
from loanview.models.application import ApplicationData
from loanview.models.enums import SectionKind, TableTheme
from loanview.models.loan import LoanDetails
from loanview.models.report import PageDecoration, ReportSection, TableBlock, TextBlock
from loanview.report.comparison import ComparisonRow, market_comparison
from loanview.report.formatting import (
    format_currency,
    format_date,
    format_percent,
    format_tenure,
    report_filename,
)
from loanview.report.schedule import display_schedule
from loanview.report.styles import BODY_TEXT, BODY_TEXT_BOLD, SECTION_TITLE
from loanview.sinks.base import DocumentSink

logger = logging.getLogger(__name__)

# Used when a report is requested before any calculation was made
SAMPLE_PRINCIPAL = Decimal("500000")
SAMPLE_RATE = Decimal("8.5")
SAMPLE_TENURE_MONTHS = 60
SAMPLE_LOAN_TYPE = "personal"

NOT_AVAILABLE = "N/A"
ELLIPSIS_ROW = ["...", "...", "...", "..."]

NEXT_STEPS_TEXT = [
    "Contact your preferred bank directly to confirm current rates, fees and "
    "eligibility before applying. Rates shown here are indicative and may change.",
    "Prepare your documents in advance: identity and address proof, income proof "
    "(salary slips or tax returns) and your last six months of bank statements.",
]

DISCLAIMER_TEXT = [
    "This report is generated for information only. Figures are estimates based on "
    "the inputs provided and published rates; the final terms offered by a lender "
    "may differ. In case of any discrepancy, the lender's sanction letter prevails.",
    "Beware of fraud: banks never ask for upfront fees, OTPs or passwords to process "
    "a loan. Apply only through official bank branches and websites.",
]


def sample_loan_details() -> LoanDetails:
    """Calculate the sample loan shown when no calculation is supplied."""
    return calculate_loan_details(SAMPLE_PRINCIPAL, SAMPLE_RATE, SAMPLE_TENURE_MONTHS)


class ReportAssembler:
    """Build loan reports and emit them into a document sink.

    Parameters
    ----------
    catalog : Catalog
        Bank and loan-type reference data used for the market comparison.
    config : LoanViewConfig | None
        Layout and branding; defaults to ``LoanViewConfig()``.
    """

    def __init__(self, catalog: Catalog, config: LoanViewConfig | None = None) -> None:
        self.catalog = catalog
        self.config = config or LoanViewConfig()

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def assemble(
        self,
        loan_details: LoanDetails | None = None,
        application: ApplicationData | None = None,
        loan_type_id: str | None = None,
    ) -> list[ReportSection]:
        """Build the report sections in print order.

        Parameters
        ----------
        loan_details : LoanDetails | None
            Calculated loan. When omitted, the sample loan is used.
        application : ApplicationData | None
            Submitted application; adds the application summary section.
        loan_type_id : str | None
            Loan type for the market comparison.

        Returns
        -------
        list[ReportSection]
            Sections ordered as in ``SectionKind``.
        """
        use_sample = loan_details is None
        if loan_details is None:
            loan_details = sample_loan_details()

        comparison_type = self._resolve_loan_type(loan_type_id, application, use_sample)
        has_application = application is not None

        offers = market_comparison(
            self.catalog,
            comparison_type,
            loan_details.principal,
            loan_details.tenure_months,
        )

        sections: list[ReportSection] = []
        if application is not None:
            sections.append(self._application_summary(application))
        sections.append(self._key_facts(loan_details, has_application))
        sections.append(self._market_comparison(offers, comparison_type))
        sections.append(self._amortization_schedule(loan_details))
        sections.extend(self._closing_sections(offers))

        logger.debug(
            "Assembled %d sections (sample=%s, loan_type=%s)",
            len(sections),
            use_sample,
            comparison_type,
        )
        return sections

    def _resolve_loan_type(
        self,
        loan_type_id: str | None,
        application: ApplicationData | None,
        use_sample: bool,
    ) -> str:
        """Pick the loan type to compare across banks."""
        if loan_type_id:
            return loan_type_id
        if use_sample:
            return SAMPLE_LOAN_TYPE
        if application is not None:
            requested = application.loan_requirement.loan_type
            if requested and self.catalog.find_loan_type(requested) is not None:
                return requested
        return self.config.default_loan_type

    def _application_summary(self, application: ApplicationData) -> ReportSection:
        personal = application.personal_details
        requirement = application.loan_requirement

        personal_rows = [
            ("Full Name", personal.full_name),
            ("Father's/Husband's Name", personal.father_husband_name),
            ("Date of Birth", personal.dob),
            ("Gender", personal.gender),
            ("Marital Status", personal.marital_status),
            ("Phone", personal.phone),
            ("Email", personal.email),
            ("ID Number", personal.id_number),
            ("Current Address", personal.current_address),
            ("Permanent Address", personal.permanent_address),
        ]
        requirement_rows = [
            ("Purpose of Loan", requirement.purpose),
            ("Loan Amount", requirement.amount),
            ("Repayment Period", requirement.repayment_period),
            ("Loan Type", self._loan_type_name(requirement.loan_type) if requirement.loan_type else ""),
        ]

        return ReportSection(
            kind=SectionKind.APPLICATION_SUMMARY,
            title="Loan Application Summary",
            blocks=[self._two_column_table(personal_rows), self._two_column_table(requirement_rows)],
            space_after=self.config.layout.paragraph_gap,
        )

    def _two_column_table(self, rows: list[tuple[str, str]]) -> TableBlock:
        return TableBlock(
            body=[[label, value or NOT_AVAILABLE] for label, value in rows],
            theme=TableTheme.PLAIN,
            bold_first_column=True,
        )

    def _key_facts(self, details: LoanDetails, has_application: bool) -> ReportSection:
        currency = self.config.branding.currency
        layout = self.config.layout

        body = [
            ["Loan Amount", format_currency(details.principal, currency)],
            ["Interest Rate (p.a.)", format_percent(details.annual_rate_percent)],
            ["Loan Tenure", format_tenure(details.tenure_months)],
            ["Monthly EMI", format_currency(details.emi, currency)],
            ["Total Interest Payable", format_currency(details.total_interest, currency)],
            ["Total Amount Payable", format_currency(details.total_payment, currency)],
        ]

        return ReportSection(
            kind=SectionKind.KEY_FACTS,
            title="Key Facts Statement",
            blocks=[TableBlock(body=body, theme=TableTheme.GRID, bold_first_column=True, font_size=10)],
            # After an application summary the table may not fit the first page
            min_space=layout.key_facts_min_space if has_application else 0.0,
            space_after=layout.section_gap,
        )

    def _market_comparison(self, rows: list[ComparisonRow], loan_type_id: str) -> ReportSection:
        currency = self.config.branding.currency
        layout = self.config.layout

        body = [
            [
                row.bank_name,
                format_percent(row.interest_rate),
                format_currency(row.emi, currency, decimals=0),
            ]
            for row in rows
        ]

        return ReportSection(
            kind=SectionKind.MARKET_COMPARISON,
            title=f"Market Comparison: {self._loan_type_name(loan_type_id)}",
            blocks=[
                TableBlock(
                    head=["Bank", "Interest Rate", "Est. Monthly EMI"],
                    body=body,
                    theme=TableTheme.STRIPED,
                )
            ],
            min_space=layout.section_min_space,
            space_after=layout.section_gap,
        )

    def _amortization_schedule(self, details: LoanDetails) -> ReportSection:
        currency = self.config.branding.currency
        layout = self.config.layout

        schedule = generate_amortization_schedule(details)
        body: list[list[str]] = []
        for row in display_schedule(schedule, details.tenure_months):
            if row is None:
                body.append(list(ELLIPSIS_ROW))
                continue
            body.append(
                [
                    str(row.period),
                    format_currency(row.principal_component, currency, decimals=0),
                    format_currency(row.interest_component, currency, decimals=0),
                    format_currency(row.remaining_balance, currency, decimals=0),
                ]
            )

        return ReportSection(
            kind=SectionKind.AMORTIZATION_SCHEDULE,
            title="Payment Plan (Amortization Schedule)",
            blocks=[
                TableBlock(
                    head=["Month", "Principal", "Interest", "Balance"],
                    body=body,
                    theme=TableTheme.GRID,
                )
            ],
            min_space=layout.section_min_space,
            space_after=layout.section_gap,
        )

    def _closing_sections(self, offers: list[ComparisonRow]) -> list[ReportSection]:
        layout = self.config.layout
        branding = self.config.branding

        next_steps: list[TableBlock | TextBlock] = [
            TextBlock(paragraphs=list(NEXT_STEPS_TEXT), style=BODY_TEXT)
        ]
        # Where to apply, in the same order as the comparison table
        links = [[offer.bank_name, offer.application_url] for offer in offers if offer.application_url]
        if links:
            next_steps.append(TableBlock(body=links, theme=TableTheme.PLAIN, bold_first_column=True))

        return [
            ReportSection(
                kind=SectionKind.NEXT_STEPS,
                title="Next Steps",
                blocks=next_steps,
                min_space=layout.section_min_space,
                space_after=layout.paragraph_gap,
            ),
            ReportSection(
                kind=SectionKind.DISCLAIMERS,
                title="Important Disclaimers",
                blocks=[TextBlock(paragraphs=list(DISCLAIMER_TEXT), style=BODY_TEXT)],
                min_space=layout.closing_min_space,
                space_after=layout.paragraph_gap,
            ),
            ReportSection(
                kind=SectionKind.SUPPORT_CONTACT,
                title="Customer Support",
                blocks=[
                    TextBlock(
                        paragraphs=[f"Helpline: {branding.helpline}"],
                        style=BODY_TEXT_BOLD,
                    )
                ],
                min_space=layout.closing_min_space,
            ),
        ]

    def _loan_type_name(self, loan_type_id: str) -> str:
        loan_type = self.catalog.find_loan_type(loan_type_id)
        return loan_type.name if loan_type is not None else loan_type_id

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def page_decoration(self, generated_at: datetime) -> PageDecoration:
        """Header and footer content for a report generated at ``generated_at``."""
        branding = self.config.branding
        return PageDecoration(
            title=branding.app_name,
            generated_at=generated_at,
            copyright=f"© {generated_at.year} {branding.copyright_holder}. All rights reserved.",
        )

    def render(
        self,
        sections: list[ReportSection],
        sink: DocumentSink,
        decoration: PageDecoration,
    ) -> None:
        """Emit sections into the sink, starting new pages as space runs out."""
        layout = self.config.layout
        # A title never starts inside the bottom margin
        title_floor = layout.bottom_margin + layout.title_height
        y = sink.current_cursor_y()

        for section in sections:
            if sink.page_height - y < max(section.min_space, title_floor):
                y = sink.new_page()

            sink.draw_text([section.title], y, SECTION_TITLE)
            y += layout.title_height

            for index, block in enumerate(section.blocks):
                if index:
                    y += layout.table_gap
                if isinstance(block, TableBlock):
                    y = sink.draw_table(block, y)
                else:
                    y = sink.draw_text(block.paragraphs, y, block.style)

            y += section.space_after
            logger.debug("Rendered %s section, cursor at %.1f", section.kind.value, y)

        sink.decorate(decoration)

    def generate(
        self,
        sink: DocumentSink,
        loan_details: LoanDetails | None = None,
        application: ApplicationData | None = None,
        loan_type_id: str | None = None,
        generated_at: datetime | None = None,
    ) -> list[ReportSection]:
        """Assemble a report and render it into ``sink``.

        Returns
        -------
        list[ReportSection]
            The sections that were rendered.
        """
        generated_at = generated_at or datetime.now()
        sections = self.assemble(loan_details, application, loan_type_id)
        self.render(sections, sink, self.page_decoration(generated_at))
        return sections

    def write_report(
        self,
        path: str | Path | None = None,
        loan_details: LoanDetails | None = None,
        application: ApplicationData | None = None,
        loan_type_id: str | None = None,
        generated_at: datetime | None = None,
    ) -> Path:
        """Generate a PDF report and save it.

        Parameters
        ----------
        path : str | Path | None
            Output file. Defaults to the configured output directory and the
            dated report filename.

        Returns
        -------
        Path
            Location of the written file.

        Raises
        ------
        SinkError
            If the file cannot be written.
        ConfigurationError
            If a configured font file cannot be loaded.
        """
        from loanview.sinks.pdf import PdfSink

        generated_at = generated_at or datetime.now()
        branding = self.config.branding
        if path is None:
            path = self.config.output.output_dir / report_filename(branding.app_name, generated_at)
        path = Path(path)

        sink = PdfSink(
            self.config.layout,
            document_title=f"{branding.app_name} Loan Report",
            fonts=self.config.fonts,
        )
        self.generate(sink, loan_details, application, loan_type_id, generated_at)
        sink.save(path)

        logger.info(
            "Wrote %d-page report to %s (generated %s)",
            sink.page_count,
            path,
            format_date(generated_at),
            extra={
                "context": {
                    "loan_type": self._resolve_loan_type(loan_type_id, application, loan_details is None),
                    "page_count": sink.page_count,
                    "path": str(path),
                }
            },
        )
        return path
