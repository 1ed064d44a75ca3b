"""
cep_weather.domain.cep

Postal-code (CEP) format validation.

Both services call `validate_cep` independently; the enrichment service does not
trust the gateway's check.
"""

from __future__ import annotations

import re

# ASCII flag: `\d` must not match non-Latin digits such as "٠١٢".
_CEP_RE = re.compile(r"\d{8}", re.ASCII)


def validate_cep(cep: str) -> bool:
    """
    True only for exactly eight decimal digits. No normalisation: "01310-100"
    or " 01310100" are rejected.
    """

    if not isinstance(cep, str) or len(cep) != 8:
        return False
    return _CEP_RE.fullmatch(cep) is not None
