"""
Tests for command-line input validation helpers.
"""

import pytest

from sbm.utils.error_handler import ValidationError
from sbm.utils.validation import (
    validate_config_file,
    validate_conflicting_arguments,
    validate_input_file,
    validate_output_file,
)


class TestValidateInputFile:
    """Tests for validate_input_file."""

    def test_existing_file(self, sample_sbm_file):
        assert validate_input_file(str(sample_sbm_file)) == sample_sbm_file.absolute()

    def test_any_extension_accepted(self, tmp_path):
        path = tmp_path / "bookmarks.txt"
        path.write_text("", encoding="utf-8")
        assert validate_input_file(path) == path.absolute()

    def test_stdin_marker(self):
        assert validate_input_file("-") is None

    def test_missing_argument(self):
        with pytest.raises(ValidationError, match="Input file is required"):
            validate_input_file(None)

    def test_nonexistent(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            validate_input_file(tmp_path / "missing.sbm")

    def test_directory(self, tmp_path):
        with pytest.raises(ValidationError, match="not a file"):
            validate_input_file(tmp_path)


class TestValidateOutputFile:
    """Tests for validate_output_file."""

    def test_stdout(self):
        assert validate_output_file(None) is None
        assert validate_output_file("-") is None

    def test_new_file_in_new_directory(self, tmp_path):
        path = tmp_path / "new" / "out.sbm"
        assert validate_output_file(path) == path.absolute()
        assert path.parent.is_dir()

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="is a directory"):
            validate_output_file(tmp_path)


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_none(self):
        assert validate_config_file(None) is None

    @pytest.mark.parametrize("name", ["c.toml", "c.json", "C.TOML"])
    def test_supported_extensions(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("", encoding="utf-8")
        assert validate_config_file(path) == path.absolute()

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "c.ini"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValidationError, match=".toml or .json"):
            validate_config_file(path)

    def test_nonexistent(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            validate_config_file(tmp_path / "missing.toml")


class TestValidateConflictingArguments:
    """Tests for validate_conflicting_arguments."""

    def test_check_with_output(self):
        with pytest.raises(ValidationError, match="--check"):
            validate_conflicting_arguments(True, "out.sbm")

    def test_check_with_stdout(self):
        validate_conflicting_arguments(True, None)
        validate_conflicting_arguments(True, "-")

    def test_output_without_check(self):
        validate_conflicting_arguments(False, "out.sbm")
