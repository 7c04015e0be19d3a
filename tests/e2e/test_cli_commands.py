"""
End-to-end tests: every CLI command run through Typer's test runner.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from regex_utils.cli import app


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
USER_SCHEMA = FIXTURES_DIR / "schemas" / "user.json"

runner = CliRunner()


@pytest.mark.e2e
class TestTextCommands:
    """Test escape, strip-accents and slugify."""

    def test_escape(self):
        result = runner.invoke(app, ["escape", "1+1=2?"])

        assert result.exit_code == 0
        assert result.stdout.strip() == r"1\+1=2\?"

    def test_escape_invalid_flags(self):
        result = runner.invoke(app, ["escape", "abc", "--flags", "q"])

        assert result.exit_code == 1
        assert "Invalid flags" in result.stdout

    def test_strip_accents(self):
        result = runner.invoke(app, ["strip-accents", "Crème brûlée"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Creme brulee"

    def test_slugify(self):
        result = runner.invoke(app, ["slugify", "Héllo, World!"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Hello-World"

    def test_slugify_separator(self):
        result = runner.invoke(app, ["slugify", "Héllo, World!", "--separator", "_"])
        assert result.stdout.strip() == "Hello_World"


@pytest.mark.e2e
class TestTransformCommand:
    """Test the transform command."""

    def test_transform_with_tests(self):
        result = runner.invoke(
            app,
            ["transform", "cafe", "-a", "-c", "-w", "--test", "CAFÉ", "--test", "cafes"],
        )

        assert result.exit_code == 0
        assert "Source" in result.stdout
        assert "Matches" in result.stdout
        assert "✓" in result.stdout
        assert "✗" in result.stdout

    def test_transform_invalid_regex(self):
        result = runner.invoke(app, ["transform", "(unclosed"])

        assert result.exit_code == 1
        assert "Invalid regex" in result.stdout

    def test_transform_invalid_flags(self):
        result = runner.invoke(app, ["transform", "abc", "--flags", "gz"])

        assert result.exit_code == 1
        assert "Invalid flags" in result.stdout


@pytest.mark.e2e
class TestCheckCommand:
    """Test the check command."""

    def test_check_phone_number(self):
        result = runner.invoke(app, ["check", "(555) 123-4567"])

        assert result.exit_code == 0
        assert "Phone number" in result.stdout
        assert "SSN" in result.stdout

    def test_markup_in_input_printed_literally(self):
        result = runner.invoke(app, ["check", "[bold]x[/x]"])

        assert result.exit_code == 0
        assert "[bold]x[/x]" in result.stdout


@pytest.mark.e2e
class TestValidateCommand:
    """Test the validate command."""

    def test_valid_file(self):
        result = runner.invoke(app, [
            "validate",
            "--data", str(FIXTURES_DIR / "data" / "valid_user.json"),
            "--schema", str(USER_SCHEMA),
        ])

        assert result.exit_code == 0
        assert "Validation passed" in result.stdout

    def test_invalid_file(self):
        result = runner.invoke(app, [
            "validate",
            "--data", str(FIXTURES_DIR / "data" / "invalid_user.json"),
            "--schema", str(USER_SCHEMA),
        ])

        assert result.exit_code == 1
        assert "age: -3 is less than the minimum of 0" in result.stdout
        assert "tags.1: 7 is not of type 'string'" in result.stdout

    def test_prefix_and_separator(self):
        result = runner.invoke(app, [
            "validate",
            "--data", str(FIXTURES_DIR / "data" / "invalid_user.json"),
            "--schema", str(USER_SCHEMA),
            "--separator", "/",
            "--prefix", "user",
        ])

        assert result.exit_code == 1
        assert "user/tags/1: 7 is not of type 'string'" in result.stdout

    def test_broken_json(self):
        result = runner.invoke(app, [
            "validate",
            "--data", str(FIXTURES_DIR / "data" / "broken.json"),
            "--schema", str(USER_SCHEMA),
        ])

        assert result.exit_code == 1
        assert "Invalid JSON in data file" in result.stdout


@pytest.mark.e2e
def test_version():
    from regex_utils import __version__

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
