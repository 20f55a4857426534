"""RNA translation and protein weight utilities."""

import logging

import numpy as np
import pandas as pd

from gencalc.tables import CODON_TABLE, CODONS, RESIDUE_WEIGHTS, STOP_CODE
from gencalc.utils.encoding import codon_indices
from gencalc.utils.sequences import check_capacity, check_sequence

logger = logging.getLogger(__name__)


def translate(rna: str, capacity: int | None = None) -> str:
    """
    Translate an RNA sequence to protein in reading frame 0.

    Codons are read three bases at a time from the start of the sequence.
    Translation ends at the first stop codon (which is not emitted), at a
    trailing partial codon, or once ``capacity - 1`` residues are written.

    Args:
        rna: RNA sequence
        capacity: Output capacity including the terminator slot

    Returns:
        Protein sequence (one-letter codes)
    """
    check_sequence(rna, "rna")
    capacity = check_capacity(capacity)

    residues = CODON_TABLE[codon_indices(rna)]

    stops = np.flatnonzero(residues == STOP_CODE)
    if stops.size:
        logger.debug("Stop codon at codon %d", stops[0])
        residues = residues[: stops[0]]

    if capacity is not None and len(residues) > capacity - 1:
        logger.debug("Translation truncated to %d residues", capacity - 1)
        residues = residues[: capacity - 1]

    return residues.tobytes().decode("ascii")


def protein_weight(protein: str) -> int:
    """
    Sum of residue weights in Daltons x 10.

    Returns 0 if the sequence is empty or holds any symbol that is not one
    of the 20 standard residues. Use ``is_valid_protein`` to tell an empty
    sequence from an invalid one.
    """
    check_sequence(protein, "protein")
    total = 0
    for aa in protein:
        if not "A" <= aa <= "Z":
            return 0
        weight = int(RESIDUE_WEIGHTS[ord(aa) - ord("A")])
        if weight == 0:
            return 0
        total += weight
    return total


def codon_usage(rna: str) -> pd.Series:
    """
    Count every codon in reading frame 0.

    Only exact RNA codons are counted; codons holding any other symbol
    are skipped.

    Args:
        rna: RNA sequence

    Returns:
        pandas Series of 64 counts indexed by codon, in codon-index order
    """
    check_sequence(rna, "rna")
    codons = pd.Series([rna[i : i + 3] for i in range(0, len(rna) - 2, 3)], dtype=object)
    counts = codons.value_counts().reindex(list(CODONS), fill_value=0).astype("int64")
    counts.index.name = "codon"
    counts.name = "count"
    return counts
