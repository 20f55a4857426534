"""Base and codon index encoding."""

import numpy as np

# 2-bit index for every 8-bit symbol; only C, G and U are non-zero
_BASE_LOOKUP = np.zeros(256, dtype=np.uint8)
_BASE_LOOKUP[ord("C")] = 1
_BASE_LOOKUP[ord("G")] = 2
_BASE_LOOKUP[ord("U")] = 3
_BASE_LOOKUP.flags.writeable = False


def base_index(base: str) -> int:
    """
    Map a single RNA base to its 2-bit index.

    A=0, C=1, G=2, U=3. Every other symbol, including DNA ``T``, maps to 0.

    Args:
        base: A single character

    Returns:
        Integer in [0, 3]
    """
    if len(base) != 1:
        raise ValueError(f"base must be a single character, got {base!r}")
    code = ord(base)
    return int(_BASE_LOOKUP[code]) if code < 256 else 0


def codon_index(b1: str, b2: str, b3: str) -> int:
    """Pack three bases into a codon table index in [0, 63]."""
    return (base_index(b1) << 4) | (base_index(b2) << 2) | base_index(b3)


def _as_symbols(seq: str) -> np.ndarray:
    # one byte per character; non-ASCII characters become '?'
    return np.frombuffer(seq.encode("ascii", errors="replace"), dtype=np.uint8)


def encode_bases(seq: str) -> np.ndarray:
    """
    Encode every base of an RNA sequence as its 2-bit index.

    Args:
        seq: RNA sequence

    Returns:
        numpy uint8 array with one entry per input symbol
    """
    return _BASE_LOOKUP[_as_symbols(seq)]


def codon_indices(seq: str) -> np.ndarray:
    """
    Codon index of every complete codon in reading frame 0.

    A trailing partial codon is dropped.

    Args:
        seq: RNA sequence

    Returns:
        numpy uint8 array of length ``len(seq) // 3``
    """
    n_codons = len(seq) // 3
    bases = encode_bases(seq[: n_codons * 3]).reshape(n_codons, 3)
    return (bases[:, 0] << 4) | (bases[:, 1] << 2) | bases[:, 2]
