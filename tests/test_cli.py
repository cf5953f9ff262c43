"""
Command line front end
"""

import logging

import pandas as pd
import pytest

from email_autocorrect.batch.cli import EXIT_BAD_INPUT, EXIT_OK, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    # main() installs its own stderr handler on the root logger
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def write_contacts(path):
    pd.DataFrame({
        'name': ['Ann', 'Bob', 'Cy'],
        'email': ['ann@gmail.com', 'bob@gmial.com', 'cy@mycompany.zzz'],
    }).to_csv(path, index=False)


class TestCheck:

    def test_typo(self, capsys):
        assert main(['check', 'user@gmial.com']) == EXIT_OK

        out = capsys.readouterr().out
        assert 'user@gmial.com: valid format' in out
        assert 'Did you mean user@gmail.com? (common typo, confidence 0.95)' in out

    def test_invalid_with_suggestion(self, capsys):
        assert main(['check', 'user@gmail']) == EXIT_OK

        out = capsys.readouterr().out
        assert 'user@gmail: Email domain must have extension (e.g., .com)' in out
        assert 'Did you mean user@gmail.com?' in out

    def test_country_option(self, capsys):
        main(['check', 'user@yahoo', '--country', 'UK'])
        assert 'user@yahoo.co.uk' in capsys.readouterr().out

    def test_custom_domain_option(self, capsys):
        main(['check', 'user@comapny.com', '--custom-domain', 'company.com'])
        assert 'matched company domain' in capsys.readouterr().out

    def test_no_suggestion(self, capsys):
        main(['check', 'user@gmail.com'])
        assert 'Did you mean' not in capsys.readouterr().out

    def test_bad_min_confidence(self, capsys):
        assert main(['check', 'user@gmail', '--min-confidence', '5']) == EXIT_BAD_INPUT
        assert 'Invalid options' in capsys.readouterr().err


class TestVerify:

    def test_writes_outputs(self, tmp_path, capsys):
        csv_path = tmp_path / 'contacts.csv'
        write_contacts(csv_path)
        output_dir = tmp_path / 'out'

        code = main(['verify', str(csv_path), '--column', 'email', '--output-dir', str(output_dir)])

        assert code == EXIT_OK
        corrected = pd.read_csv(output_dir / 'contacts_corrected.csv')
        assert corrected['email'].tolist() == ['ann@gmail.com', 'bob@gmail.com', 'cy@mycompany.zzz']

        invalid = pd.read_csv(output_dir / 'contacts_invalid.csv')
        assert invalid['email'].tolist() == ['cy@mycompany.zzz']

        report = (output_dir / 'contacts_report.txt').read_text(encoding='utf-8')
        assert 'Total emails processed: 3' in report
        assert 'EMAIL VERIFICATION REPORT' in capsys.readouterr().out

    def test_defaults_to_csv_folder(self, tmp_path):
        csv_path = tmp_path / 'contacts.csv'
        write_contacts(csv_path)

        assert main(['verify', str(csv_path), '--column', 'email']) == EXIT_OK
        assert (tmp_path / 'contacts_report.txt').exists()

    def test_missing_column(self, tmp_path, capsys):
        csv_path = tmp_path / 'contacts.csv'
        write_contacts(csv_path)

        assert main(['verify', str(csv_path), '--column', 'mail']) == EXIT_BAD_INPUT
        err = capsys.readouterr().err
        assert "Column 'mail' not found" in err
        assert 'Available columns: name, email' in err

    def test_missing_file(self, tmp_path, capsys):
        assert main(['verify', str(tmp_path / 'nope.csv'), '--column', 'email']) == EXIT_BAD_INPUT
        assert 'Failed to load CSV' in capsys.readouterr().err
