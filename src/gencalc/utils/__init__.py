"""Shared utility functions."""

from .sequences import (
    is_valid_dna,
    is_valid_rna,
    is_valid_protein,
    transcribe,
    reverse_complement,
    gc_content,
    count_codon,
)
from .encoding import base_index, codon_index, encode_bases, codon_indices
from .translation import translate, protein_weight, codon_usage
from .params import parse_params, get_profile_params

__all__ = [
    "is_valid_dna",
    "is_valid_rna",
    "is_valid_protein",
    "transcribe",
    "reverse_complement",
    "gc_content",
    "count_codon",
    "base_index",
    "codon_index",
    "encode_bases",
    "codon_indices",
    "translate",
    "protein_weight",
    "codon_usage",
    "parse_params",
    "get_profile_params",
]
