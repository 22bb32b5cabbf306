import unittest
from unittest.mock import patch
from click.testing import CliRunner
import json
import os

from PIL import Image

from rn_toolbox.cli.commands import cli
from rn_toolbox.cli.errors import CommandError, ExitCode
from rn_toolbox.cli.runner import get_version


class TestCliCore(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_version_flag(self):
        """Test that --version prints tool, runtime and platform."""
        result = self.runner.invoke(cli, ['--version'])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(f"rn-toolbox/{get_version()} python-", result.output)

    def test_short_version_flag_anywhere(self):
        """-V wins even after a command name."""
        result = self.runner.invoke(cli, ['icons', '-V'])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("rn-toolbox/", result.output)

    def test_global_help_without_arguments(self):
        result = self.runner.invoke(cli, [])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("COMMANDS", result.output)
        for name in ("dotenv", "icons", "splash"):
            self.assertIn(name, result.output)

    def test_global_help_flags(self):
        for flag in ('--help', '-h'):
            result = self.runner.invoke(cli, [flag])
            self.assertEqual(result.exit_code, 0)
            self.assertIn("USAGE", result.output)
            self.assertIn("COMMANDS", result.output)

    def test_unknown_command(self):
        result = self.runner.invoke(cli, ['unknown'])
        self.assertEqual(result.exit_code, ExitCode.INVALID_ARGUMENT)
        self.assertIn("Unknown command: unknown", result.output)
        self.assertIn("Available commands: dotenv, icons, splash", result.output)

    def test_command_help(self):
        result = self.runner.invoke(cli, ['icons', '--help'])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Generate app icons", result.output)
        self.assertIn("--appName", result.output)
        self.assertIn("--verbose", result.output)

    def test_unknown_flag_is_invalid_argument(self):
        result = self.runner.invoke(cli, ['dotenv', 'dev', '--nope'])
        self.assertEqual(result.exit_code, ExitCode.INVALID_ARGUMENT)

    def test_unknown_flag_with_markup_characters(self):
        """Tokens echoed in usage errors are printed literally."""
        result = self.runner.invoke(cli, ['dotenv', '--[/x]'])
        self.assertEqual(result.exit_code, ExitCode.INVALID_ARGUMENT)
        self.assertIn("--[/x]", result.output)

    def test_help_wins_over_invalid_flags(self):
        for args in (['icons', '--help', '--bogus'], ['dotenv', '-h', '--verbose=yes']):
            result = self.runner.invoke(cli, args)
            self.assertEqual(result.exit_code, 0, args)
            self.assertIn(f"$ rn-toolbox {args[0]}", result.output)

    def test_dotenv_missing_argument(self):
        result = self.runner.invoke(cli, ['dotenv'])
        self.assertEqual(result.exit_code, ExitCode.INVALID_ARGUMENT)
        self.assertIn("Missing required argument: environmentName", result.output)

    def test_dotenv_copies_environment(self):
        with self.runner.isolated_filesystem():
            with open('.env.dev', 'w') as f:
                f.write('API_URL=https://dev.example.com\n')

            result = self.runner.invoke(cli, ['dotenv', 'dev'])
            self.assertEqual(result.exit_code, 0)
            self.assertIn("Generating .env from ./.env.dev file...", result.output)
            with open('.env') as f:
                self.assertEqual(f.read(), 'API_URL=https://dev.example.com\n')

    def test_dotenv_missing_environment_file(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli, ['dotenv', 'staging'])
            self.assertEqual(result.exit_code, ExitCode.FILE_NOT_FOUND)

    def test_icons_without_app_name(self):
        with self.runner.isolated_filesystem():
            os.makedirs('assets')
            Image.new("RGBA", (64, 64), (255, 0, 0, 255)).save('assets/icon.png')

            result = self.runner.invoke(cli, ['icons'])
            self.assertEqual(result.exit_code, ExitCode.CONFIG_ERROR)

    def test_splash_reads_app_name_from_app_json(self):
        with self.runner.isolated_filesystem():
            os.makedirs('assets')
            Image.new("RGB", (1242, 2208), (0, 0, 0)).save('assets/splashscreen.png')
            with open('app.json', 'w') as f:
                json.dump({"name": "FromConfig", "displayName": "From Config"}, f)

            result = self.runner.invoke(cli, ['splash'])
            self.assertEqual(result.exit_code, 0)
            self.assertIn("Generated splashscreens for 'FromConfig' app.", result.output)
            self.assertTrue(os.path.isdir('ios/FromConfig/Images.xcassets/Splashscreen.imageset'))

    @patch('rn_toolbox.cli.commands.run_cli')
    def test_exit_code_is_forwarded(self, mock_run):
        """The click wrapper exits with whatever the dispatcher returns."""
        async def fake_run(argv):
            return ExitCode.GENERATION_ERROR

        mock_run.side_effect = fake_run
        result = self.runner.invoke(cli, ['icons', '-a', 'X'])
        self.assertEqual(result.exit_code, ExitCode.GENERATION_ERROR)
        args, _ = mock_run.call_args
        self.assertEqual(list(args[0]), ['icons', '-a', 'X'])

    @patch('rn_toolbox.cli.commands.run_cli')
    def test_unstructured_errors_propagate(self, mock_run):
        async def fake_run(argv):
            raise RuntimeError("boom")

        mock_run.side_effect = fake_run
        result = self.runner.invoke(cli, ['icons'])
        self.assertIsInstance(result.exception, RuntimeError)
        self.assertNotIsInstance(result.exception, CommandError)


if __name__ == '__main__':
    unittest.main()
