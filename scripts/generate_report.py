#!/usr/bin/env python3
"""Generate a LoanView loan report.

Computes a loan from the command line arguments, compares it across the
banks in the default catalog and writes a PDF report. Without --amount the
report shows the sample personal loan.

Examples:
    python scripts/generate_report.py --amount 2500000 --rate 8.6 --tenure 240 --loan-type home
    python scripts/generate_report.py --sample-applicant --seed 7 --output report.pdf
    python scripts/generate_report.py --amount 300000 --rate 11 --tenure 36 --dump-json commands.json
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loanview.catalog import default_catalog
from loanview.config import LoanViewConfig
from loanview.engine import calculate_loan_details
from loanview.exceptions import LoanViewError
from loanview.generators import ApplicantGenerator
from loanview.logging import get_logger, setup_logging
from loanview.report import ReportAssembler
from loanview.sinks import RecordingSink

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Generate a LoanView loan report")
    parser.add_argument(
        "--amount",
        type=str,
        default=None,
        help="Loan amount (default: sample loan of 500000)",
    )
    parser.add_argument(
        "--rate",
        type=str,
        default="8.5",
        help="Annual interest rate in percent (default: 8.5)",
    )
    parser.add_argument(
        "--tenure",
        type=int,
        default=60,
        help="Tenure in months (default: 60)",
    )
    parser.add_argument(
        "--loan-type",
        type=str,
        default=None,
        help="Loan type to compare across banks (home, personal, education, ...)",
    )
    parser.add_argument(
        "--sample-applicant",
        action="store_true",
        help="Attach a synthetic applicant to the report",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the synthetic applicant",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PDF path (default: OUTPUT_DIR/<AppName>_Report_<date>.pdf)",
    )
    parser.add_argument(
        "--dump-json",
        type=Path,
        default=None,
        help="Write the recorded drawing commands as JSON instead of a PDF",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format (default: standard)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = LoanViewConfig.from_env()
    setup_logging(config.log_level, args.log_format)

    catalog = default_catalog()
    assembler = ReportAssembler(catalog, config)

    try:
        if args.loan_type:
            catalog.get_loan_type(args.loan_type)

        loan_details = None
        if args.amount is not None:
            loan_details = calculate_loan_details(args.amount, args.rate, args.tenure)

        application = None
        if args.sample_applicant:
            application = ApplicantGenerator(catalog, seed=args.seed).generate(args.loan_type)

        if args.dump_json:
            sink = RecordingSink(config.layout)
            assembler.generate(sink, loan_details, application, args.loan_type)
            sink.save(args.dump_json)
            logger.info("Wrote %d drawing commands to %s", len(sink.commands), args.dump_json)
        else:
            assembler.write_report(args.output, loan_details, application, args.loan_type)
    except LoanViewError as exc:
        logger.error("Report generation failed: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
