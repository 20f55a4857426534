"""Batch profiling of DNA sequences into a feature table."""

import logging
import time
from collections.abc import Iterable, Mapping
from pathlib import Path

import pandas as pd

from gencalc.utils import (
    count_codon,
    gc_content,
    get_profile_params,
    is_valid_dna,
    parse_params,
    protein_weight,
    transcribe,
    translate,
)

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = ["name", "length", "valid_dna", "gc", "rna", "protein", "weight", "codon_count"]


def profile_sequence(dna: str, capacity: int | None = None, codon: str = "AUG") -> dict:
    """
    Compute the feature row of a single DNA sequence.

    The sequence is transcribed, its RNA translated in frame 0, and the
    resulting protein weighed. ``codon`` is counted in the RNA.
    """
    rna = transcribe(dna, capacity)
    protein = translate(rna, capacity)
    return {
        "length": len(dna),
        "valid_dna": is_valid_dna(dna),
        "gc": gc_content(dna),
        "rna": rna,
        "protein": protein,
        "weight": protein_weight(protein),
        "codon_count": count_codon(rna, codon),
    }


def profile_sequences(
    seqs: Mapping[str, str] | Iterable[str],
    capacity: int | None = None,
    codon: str = "AUG",
) -> pd.DataFrame:
    """
    Profile a batch of DNA sequences.

    Args:
        seqs: Mapping of name -> DNA sequence, or an iterable of sequences
            (named seq_1, seq_2, ...)
        capacity: Output capacity for transcription and translation
        codon: RNA codon to count in every transcript

    Returns:
        DataFrame with one row per sequence and PROFILE_COLUMNS as columns
    """
    if isinstance(seqs, str):
        raise TypeError("seqs must be a mapping or iterable of sequences, not a single string")
    if isinstance(seqs, Mapping):
        named = list(seqs.items())
    else:
        named = [(f"seq_{i+1}", seq) for i, seq in enumerate(seqs)]

    start_time = time.time()
    rows = [{"name": name, **profile_sequence(seq, capacity, codon)} for name, seq in named]

    if not rows:
        features_df = pd.DataFrame(columns=PROFILE_COLUMNS)
    else:
        features_df = pd.DataFrame(rows)[PROFILE_COLUMNS]

    runtime = time.time() - start_time
    logger.info("Profiled %d sequences (%.1f sec)", len(features_df), runtime)
    return features_df


def profile_from_params(seqs: Mapping[str, str] | Iterable[str], param_file: str | Path) -> pd.DataFrame:
    """Profile a batch of sequences using capacity and codon from a params file."""
    params = get_profile_params(parse_params(param_file))
    logger.debug("Profile parameters: %s", params)
    return profile_sequences(seqs, **params)
