"""Tests for the preprocess CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from preprocessor.cli.main import main


class TestRunCommand(TestCase):
    """CLI run command."""

    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        self.input_file = self.test_dir / 'source.txt'
        self.input_file.write_text("(A = 1)\n(A = 2)\nval {A}\nlost {B}\n")

        self.original_cwd = Path.cwd()
        os.chdir(self.test_dir)

    def tearDown(self):
        os.chdir(self.original_cwd)
        shutil.rmtree(self.test_dir)

    def test_no_command_prints_help(self):
        self.assertEqual(main([]), 1)

    def test_run_writes_derived_output(self):
        exit_code = main(['run', str(self.input_file)])

        self.assertEqual(exit_code, 0)
        output = (self.test_dir / 'source.txt.out').read_text()
        self.assertEqual(output, "(A = 1)\n(A = 2)\nval 1.0\n")

    def test_run_explicit_output_and_report(self):
        output_file = self.test_dir / 'out' / 'result.txt'
        output_file.parent.mkdir()
        report_file = self.test_dir / 'report.json'

        exit_code = main([
            'run', str(self.input_file),
            '--output', str(output_file),
            '--report', str(report_file),
            '--quiet',
        ])

        self.assertEqual(exit_code, 0)
        self.assertTrue(output_file.exists())
        report = json.loads(report_file.read_text())
        kinds = sorted(d['kind'] for d in report['diagnostics'])
        self.assertEqual(kinds, ['duplicate_binding', 'nonexistent_binding'])
        self.assertEqual(report['bindings']['A']['line_number'], 1)

    def test_suffix_flag(self):
        exit_code = main(['run', str(self.input_file), '--suffix', '.done'])

        self.assertEqual(exit_code, 0)
        self.assertTrue((self.test_dir / 'source.txt.done').exists())

    def test_missing_input_exits_1_without_output(self):
        exit_code = main(['run', 'nowhere.txt'])

        self.assertEqual(exit_code, 1)
        self.assertFalse((self.test_dir / 'nowhere.txt.out').exists())

    def test_undecodable_input_exits_1_without_output(self):
        self.input_file.write_bytes(b"\xff\xfe")

        with self.assertLogs(level='ERROR') as logs:
            exit_code = main(['run', str(self.input_file)])

        self.assertEqual(exit_code, 1)
        self.assertTrue(any("Cannot read input file" in line for line in logs.output))
        self.assertFalse((self.test_dir / 'source.txt.out').exists())

    def test_prompts_for_input_when_omitted(self):
        with patch('builtins.input', return_value=str(self.input_file)):
            exit_code = main(['run'])

        self.assertEqual(exit_code, 0)
        self.assertTrue((self.test_dir / 'source.txt.out').exists())

    def test_empty_prompt_answer_exits_1(self):
        with patch('builtins.input', return_value='   '):
            self.assertEqual(main(['run']), 1)

    def test_config_file_applied(self):
        config_file = self.test_dir / 'preprocess.yml'
        config_file.write_text("output_suffix: .pp\nreport: true\n")

        exit_code = main(['run', str(self.input_file), '--config', str(config_file)])

        self.assertEqual(exit_code, 0)
        self.assertTrue((self.test_dir / 'source.txt.pp').exists())
        self.assertTrue((self.test_dir / 'source.txt.pp.report.json').exists())

    def test_invalid_config_exits_2(self):
        config_file = self.test_dir / 'preprocess.yml'
        config_file.write_text("bogus: 1\n")

        exit_code = main(['run', str(self.input_file), '--config', str(config_file)])

        self.assertEqual(exit_code, 2)
        self.assertFalse((self.test_dir / 'source.txt.out').exists())

    def test_missing_config_exits_1(self):
        exit_code = main(['run', str(self.input_file), '--config', 'absent.yml'])

        self.assertEqual(exit_code, 1)
