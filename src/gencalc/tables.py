"""Static lookup tables for translation and residue weights."""

import numpy as np
from Bio.Data import IUPACData

STOP_MARKER = "*"
COMPLEMENT_FALLBACK = "N"

DNA_LETTERS = frozenset(IUPACData.unambiguous_dna_letters)
RNA_LETTERS = frozenset(IUPACData.unambiguous_rna_letters)
PROTEIN_LETTERS = frozenset(IUPACData.protein_letters)

# Standard genetic code indexed by (b1 << 4) | (b2 << 2) | b3 with A=0, C=1, G=2, U=3.
# Rows below are b1 = A, C, G, U.
CODON_TABLE = np.frombuffer(
    b"KNKNTTTTRSRSIIMI"
    b"QHQHPPPPRRRRLLLL"
    b"EDEDAAAAGGGGVVVV"
    b"*Y*YSSSS*CWCLFLF",
    dtype=np.uint8,
)

STOP_CODE = ord(STOP_MARKER)

# Molecular weight per residue in Daltons x 10, indexed by letter - 'A'.
# Zero marks letters that are not one of the 20 standard residues.
RESIDUE_WEIGHTS = np.array(
    [
        89,   # A
        0,    # B
        121,  # C
        133,  # D
        147,  # E
        165,  # F
        75,   # G
        155,  # H
        131,  # I
        0,    # J
        146,  # K
        131,  # L
        149,  # M
        132,  # N
        0,    # O
        115,  # P
        146,  # Q
        174,  # R
        105,  # S
        119,  # T
        0,    # U
        117,  # V
        204,  # W
        0,    # X
        181,  # Y
        0,    # Z
    ],
    dtype=np.uint16,
)
RESIDUE_WEIGHTS.flags.writeable = False


def codon_for_index(index: int) -> str:
    """Return the RNA codon whose codon index is ``index`` (0-63)."""
    if not 0 <= index < len(CODON_TABLE):
        raise ValueError(f"codon index must be in [0, 63], got {index}")
    bases = "ACGU"
    return bases[index >> 4] + bases[(index >> 2) & 3] + bases[index & 3]


CODONS = tuple(codon_for_index(i) for i in range(len(CODON_TABLE)))
