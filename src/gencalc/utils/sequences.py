"""Sequence validation, transcription and composition utilities."""

import logging
import operator

from gencalc.tables import (
    COMPLEMENT_FALLBACK,
    DNA_LETTERS,
    PROTEIN_LETTERS,
    RNA_LETTERS,
)

logger = logging.getLogger(__name__)


def check_sequence(seq, name: str = "sequence") -> str:
    """
    Ensure a sequence argument is a string.

    Raises:
        TypeError: If the sequence is not a string
    """
    if not isinstance(seq, str):
        raise TypeError(f"{name} must be a string, got {type(seq).__name__}")
    return seq


def check_capacity(capacity: int | None) -> int | None:
    """
    Validate an output capacity.

    The capacity counts the terminator slot of a fixed-size buffer, so a
    result never holds more than ``capacity - 1`` symbols. ``None`` means
    unbounded.

    Raises:
        TypeError: If capacity is not an integer
        ValueError: If capacity is smaller than 1
    """
    if capacity is None:
        return None
    if isinstance(capacity, bool):
        raise TypeError("capacity must be an int, got bool")
    try:
        capacity = operator.index(capacity)
    except TypeError:
        raise TypeError(f"capacity must be an int, got {type(capacity).__name__}") from None
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}")
    return capacity


def check_codon(codon: str) -> str:
    """Ensure a codon argument holds exactly three symbols."""
    check_sequence(codon, "codon")
    if len(codon) != 3:
        raise ValueError(f"codon must be exactly 3 symbols, got {codon!r}")
    return codon


def is_valid_dna(seq: str) -> bool:
    """Return True if every symbol is one of A, C, G, T (empty is valid)."""
    return all(b in DNA_LETTERS for b in check_sequence(seq))


def is_valid_rna(seq: str) -> bool:
    """Return True if every symbol is one of A, C, G, U (empty is valid)."""
    return all(b in RNA_LETTERS for b in check_sequence(seq))


def is_valid_protein(seq: str) -> bool:
    """Return True if every symbol is one of the 20 standard residues."""
    return all(aa in PROTEIN_LETTERS for aa in check_sequence(seq))


def transcribe(dna: str, capacity: int | None = None) -> str:
    """
    Transcribe DNA to RNA by replacing every ``T`` with ``U``.

    Other symbols pass through unchanged. The result is truncated to
    ``capacity - 1`` symbols.

    Args:
        dna: DNA sequence
        capacity: Output capacity including the terminator slot

    Returns:
        RNA sequence
    """
    check_sequence(dna, "dna")
    capacity = check_capacity(capacity)
    if capacity is not None:
        dna = dna[: capacity - 1]
    return dna.replace("T", "U")


class _ComplementTable(dict):
    """Translation table mapping any non-ACGT symbol to the fallback base."""

    def __missing__(self, key):
        return COMPLEMENT_FALLBACK


# Reverse-complement translation table
REV_TABLE = _ComplementTable(str.maketrans({"A": "T", "T": "A", "C": "G", "G": "C"}))


def reverse_complement(dna: str, capacity: int | None = None) -> str:
    """
    Reverse complement a DNA sequence.

    A<->T and C<->G; any other symbol complements to ``N``. If the input
    does not fit into ``capacity - 1`` symbols the result is empty rather
    than a truncated reversal.

    Args:
        dna: DNA sequence
        capacity: Output capacity including the terminator slot

    Returns:
        Reverse-complemented sequence, or "" on overflow
    """
    check_sequence(dna, "dna")
    capacity = check_capacity(capacity)
    if capacity is not None and len(dna) > capacity - 1:
        logger.debug(
            "Sequence of length %d does not fit capacity %d; returning empty reverse complement",
            len(dna), capacity,
        )
        return ""
    return dna.translate(REV_TABLE)[::-1]


def gc_content(seq: str) -> int:
    """
    Percentage of symbols equal to ``G`` or ``C``, truncated to an integer.

    The alphabet is not validated: any other symbol, lowercase included,
    counts toward the length only. An empty sequence returns 0.
    """
    check_sequence(seq)
    if not seq:
        return 0
    gc = seq.count("G") + seq.count("C")
    return gc * 100 // len(seq)


def count_codon(rna: str, codon: str) -> int:
    """
    Count frame-aligned occurrences of a codon.

    The sequence is scanned in strides of three from position 0, so
    overlapping or out-of-frame matches are not counted. A trailing
    partial codon is ignored.

    Args:
        rna: RNA sequence
        codon: Exactly three symbols

    Returns:
        Number of matching codons
    """
    check_sequence(rna, "rna")
    check_codon(codon)
    return sum(1 for i in range(0, len(rna) - 2, 3) if rna[i : i + 3] == codon)
