"""
Command line front end

    email-autocorrect check "user@gmial.com"
    email-autocorrect verify contacts.csv --column email --load-tlds
"""

import argparse
import asyncio
import sys
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from email_autocorrect.batch.verification import (
    BatchVerifier,
    export_corrected,
    export_invalid,
    export_report,
    generate_report,
)
from email_autocorrect.core.corrector import EmailCorrector
from email_autocorrect.core.models import CorrectionConfig
from email_autocorrect.utils.exceptions import ColumnNotFoundError
from email_autocorrect.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog='email-autocorrect',
        description='Validate and correct email addresses',
    )
    parser.add_argument('--log-level', default=None, help='DEBUG, INFO, WARNING, ...')

    subparsers = parser.add_subparsers(dest='command', required=True)

    def add_correction_options(sub):
        sub.add_argument('--country', default=None, help='Country hint for regional extensions, e.g. UK')
        sub.add_argument('--custom-domain', action='append', default=[], dest='custom_domains',
                         help='Company domain to recognise (repeatable)')
        sub.add_argument('--min-confidence', type=float, default=None,
                         help='Drop suggestions below this confidence')

    check = subparsers.add_parser('check', help='Check a single address')
    check.add_argument('email')
    add_correction_options(check)

    verify = subparsers.add_parser('verify', help='Verify an address column in a CSV file')
    verify.add_argument('csv_path', type=Path)
    verify.add_argument('--column', required=True, help='Name of the email column')
    verify.add_argument('--output-dir', type=Path, default=None,
                        help='Where to write exports (defaults to the CSV folder)')
    verify.add_argument('--load-tlds', action='store_true',
                        help='Merge the public TLD list before verifying')
    verify.add_argument('--tld-source', default=None, help='Alternative TLD list URL')
    add_correction_options(verify)

    return parser


def build_config(args):
    options = {'custom_domains': args.custom_domains, 'country': args.country}
    if args.min_confidence is not None:
        options['min_confidence'] = args.min_confidence
    return CorrectionConfig(**options)


def run_check(args, corrector, config):
    validation = corrector.validate(args.email)
    if validation.is_valid:
        print(f"{args.email}: valid format")
    else:
        print(f"{args.email}: {validation.error}")

    suggestion = corrector.correct(args.email, config)
    if suggestion is not None:
        print(f"Did you mean {suggestion.suggested}? ({suggestion.reason}, confidence {suggestion.confidence:.2f})")

    return EXIT_OK


def run_verify(args, corrector, config):
    try:
        df = pd.read_csv(args.csv_path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        print(f"Failed to load CSV: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.load_tlds:
        asyncio.run(corrector.load_tlds(args.tld_source))

    try:
        verifier = BatchVerifier(df, args.column, corrector=corrector, config=config)
    except ColumnNotFoundError as e:
        available = ', '.join(e.details['available'])
        print(f"{e.message}. Available columns: {available}", file=sys.stderr)
        return EXIT_BAD_INPUT

    results = verifier.run()
    report = generate_report(results)

    output_dir = args.output_dir or args.csv_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)
    stem = args.csv_path.stem

    export_corrected(results['df'], output_dir / f"{stem}_corrected.csv")
    export_invalid(results, output_dir / f"{stem}_invalid.csv")
    export_report(report, output_dir / f"{stem}_report.txt")

    print(report)
    return EXIT_OK


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    corrector = EmailCorrector()

    if args.command == 'check':
        return run_check(args, corrector, config)
    return run_verify(args, corrector, config)


if __name__ == '__main__':
    sys.exit(main())
