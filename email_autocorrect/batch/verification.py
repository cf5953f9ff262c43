"""
Batch verification of an address column in a pandas DataFrame
"""

import pandas as pd

from email_autocorrect.core.corrector import EmailCorrector, default_corrector
from email_autocorrect.utils.exceptions import ColumnNotFoundError
from email_autocorrect.utils.logging import get_logger

logger = get_logger(__name__)


def verify_address(email, corrector=None, config=None):
    """
    Validate and attempt to correct a single address

    Returns:
        dict: {
            'status': 'valid' | 'corrected' | 'invalid',
            'corrected_email': str (if corrected),
            'confidence': float (if corrected),
            'reason': str
        }
    """
    corrector = corrector or default_corrector

    if email is None or pd.isna(email) or not str(email).strip():
        return {
            'status': 'invalid',
            'reason': 'Email is required'
        }

    email = str(email).strip()

    suggestion = corrector.correct(email, config)
    if suggestion is not None and corrector.validate(suggestion.suggested).is_valid:
        corrected = corrector.validator.normalize(suggestion.suggested) or suggestion.suggested
        return {
            'status': 'corrected',
            'corrected_email': corrected,
            'confidence': suggestion.confidence,
            'reason': suggestion.reason
        }

    validation = corrector.validate(email)
    if not validation.is_valid:
        return {
            'status': 'invalid',
            'reason': validation.error
        }

    domain = email.rsplit('@', 1)[1]
    if not corrector.registry.has_valid_tld(domain):
        tld = domain.rstrip('.').rsplit('.', 1)[-1].lower()
        return {
            'status': 'invalid',
            'reason': f"Domain issue: unknown top-level domain .{tld}"
        }

    return {
        'status': 'valid',
        'reason': 'Valid email format with known top-level domain'
    }


class BatchVerifier:
    """
    Runs verify_address over every row of one DataFrame column

    Progress and status callbacks replace the signals of an interactive
    front end; both are optional.
    """

    def __init__(self, df, email_column, corrector=None, config=None,
                 on_progress=None, on_status=None):
        if email_column not in df.columns:
            raise ColumnNotFoundError(email_column, [str(c) for c in df.columns])
        self.df = df.copy()
        self.email_column = email_column
        self.corrector = corrector or default_corrector
        self.config = config
        self.on_progress = on_progress
        self.on_status = on_status

    def run(self):
        results = {
            'corrected': [],
            'invalid': [],
            'valid': [],
            'total': len(self.df)
        }

        for position, (idx, row) in enumerate(self.df.iterrows(), 1):
            email = row[self.email_column]
            if self.on_status:
                self.on_status(f"Verifying: {email}")

            result = verify_address(email, self.corrector, self.config)

            if result['status'] == 'corrected':
                self.df.at[idx, self.email_column] = result['corrected_email']
                results['corrected'].append({
                    'original': email,
                    'corrected': result['corrected_email'],
                    'confidence': result['confidence'],
                    'reason': result['reason']
                })
            elif result['status'] == 'invalid':
                results['invalid'].append({
                    'email': email,
                    'reason': result['reason']
                })
            else:
                results['valid'].append(email)

            if self.on_progress:
                self.on_progress(int(position / len(self.df) * 100))

        logger.info(
            f"Verified {results['total']} rows: {len(results['valid'])} valid, "
            f"{len(results['corrected'])} corrected, {len(results['invalid'])} invalid"
        )

        results['df'] = self.df
        return results


def generate_report(results):
    report = "EMAIL VERIFICATION REPORT\n"
    report += "=" * 50 + "\n\n"
    report += f"Total emails processed: {results['total']}\n"
    report += f"Valid emails: {len(results['valid'])}\n"
    report += f"Corrected emails: {len(results['corrected'])}\n"
    report += f"Invalid emails: {len(results['invalid'])}\n\n"

    if results['corrected']:
        report += "\nCORRECTED EMAILS:\n"
        report += "-" * 50 + "\n"
        for item in results['corrected']:
            report += f"Original: {item['original']}\n"
            report += f"Corrected: {item['corrected']}\n"
            report += f"Reason: {item['reason']} (confidence {item['confidence']:.2f})\n\n"

    if results['invalid']:
        report += "\nINVALID EMAILS:\n"
        report += "-" * 50 + "\n"
        for item in results['invalid']:
            report += f"Email: {item['email']}\n"
            report += f"Reason: {item['reason']}\n\n"

    return report


def export_corrected(df, file_path):
    df.to_csv(file_path, index=False)


def export_invalid(results, file_path):
    invalid_df = pd.DataFrame(results['invalid'], columns=['email', 'reason'])
    invalid_df.to_csv(file_path, index=False)


def export_report(report, file_path):
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(report)
