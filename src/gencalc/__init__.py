"""gencalc - table-driven nucleotide and protein sequence calculations."""

from gencalc.utils import (
    is_valid_dna,
    is_valid_rna,
    is_valid_protein,
    transcribe,
    translate,
    reverse_complement,
    gc_content,
    count_codon,
    codon_usage,
    protein_weight,
    base_index,
    codon_index,
)
from gencalc.profile import profile_sequences, profile_from_params

__version__ = "0.1.0"

__all__ = [
    "is_valid_dna",
    "is_valid_rna",
    "is_valid_protein",
    "transcribe",
    "translate",
    "reverse_complement",
    "gc_content",
    "count_codon",
    "codon_usage",
    "protein_weight",
    "base_index",
    "codon_index",
    "profile_sequences",
    "profile_from_params",
]
