"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_dna_sequence():
    """Return a sample DNA sequence for testing."""
    return "ATGGCCTTTTAA"


@pytest.fixture
def sample_rna_sequence():
    """Return the transcript of the sample DNA sequence."""
    return "AUGGCCUUUUAA"


@pytest.fixture
def sample_batch():
    """Return a small named batch of DNA sequences."""
    return {
        "orf": "ATGGCCTTTTAA",
        "gc_rich": "GGATCC",
        "empty": "",
    }
