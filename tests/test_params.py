"""Tests for parameter parsing utilities."""

import os
import tempfile

import pytest

from gencalc.utils.params import parse_params, get_profile_params


def _write_params(*lines):
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
        f.write("\n".join(lines) + "\n")
    return f.name


class TestParseParams:
    """Tests for parameter file parsing."""

    def test_parse_simple_params(self):
        """Test parsing numeric and string values."""
        path = _write_params("MAX_SEQ_LEN = 64", "PROFILE_CODON = GCU")
        try:
            params = parse_params(path)
            assert params["MAX_SEQ_LEN"] == 64
            assert params["PROFILE_CODON"] == "GCU"
        finally:
            os.unlink(path)

    def test_parse_params_with_comments(self):
        """Test comment lines are skipped, including ones holding '='."""
        path = _write_params("## This is a comment", "MAX_SEQ_LEN = 10", "# OLD = 5")
        try:
            params = parse_params(path)
            assert params == {"MAX_SEQ_LEN": 10}
        finally:
            os.unlink(path)

    def test_parse_params_with_empty_lines(self):
        """Test parsing params file with empty lines."""
        path = _write_params("MAX_SEQ_LEN = 10", "", "PROFILE_CODON = AUG")
        try:
            params = parse_params(path)
            assert len(params) == 2
        finally:
            os.unlink(path)


class TestGetProfileParams:
    """Tests for profile parameter extraction."""

    def test_defaults(self):
        """Test defaults when nothing is set."""
        assert get_profile_params({}) == {"capacity": 1024, "codon": "AUG"}

    def test_cast(self):
        """Test float capacity is cast to int."""
        params = get_profile_params({"MAX_SEQ_LEN": 32.0, "PROFILE_CODON": "UUU"})
        assert params["capacity"] == 32
        assert isinstance(params["capacity"], int)
        assert params["codon"] == "UUU"

    def test_numeric_codon_rejected(self):
        """Test a numeric codon value names the params key in the error."""
        with pytest.raises(ValueError, match="PROFILE_CODON"):
            get_profile_params({"PROFILE_CODON": 111.0})

    def test_wrong_length_codon_rejected(self):
        """Test a codon that is not three symbols is rejected."""
        with pytest.raises(ValueError, match="PROFILE_CODON"):
            get_profile_params({"PROFILE_CODON": "AUGG"})
