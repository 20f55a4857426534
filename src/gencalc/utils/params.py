"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse a params.txt file of ``NAME = value`` lines.

    Numeric values are parsed as float first, then cast where needed.
    Comment lines starting with ``#`` and lines without ``=`` are skipped.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value
    """
    params = {}
    with open(param_file) as f:
        for line in f:
            line = line.strip()
            if line.startswith("#") or "=" not in line:
                continue
            name, value = line.split("=", 1)
            name = name.strip()
            value = value.strip()
            try:
                params[name] = float(value)
            except ValueError:
                params[name] = value
    return params


def get_profile_params(params: dict) -> dict:
    """Extract batch profiling parameters from parsed params dict."""
    codon = params.get("PROFILE_CODON", "AUG")
    if not isinstance(codon, str) or len(codon) != 3:
        raise ValueError(f"PROFILE_CODON must be a 3-symbol codon, got {codon!r}")
    return {
        "capacity": int(params.get("MAX_SEQ_LEN", 1024)),
        "codon": codon,
    }
