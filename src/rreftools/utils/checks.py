from __future__ import annotations

from typing import List, Optional, Sequence

from rreftools.arith.rational import Rational


def leading_column(row: Sequence[Rational]) -> Optional[int]:
    """Index of the first non-zero entry of *row*, or None for a zero row."""
    for j, c in enumerate(row):
        if not c.is_zero():
            return j
    return None


def is_rref(M: Sequence[Sequence[Rational]]) -> bool:
    """
    Structural RREF check over all columns:
      - zero rows sit below every non-zero row
      - leading entries equal 1 and move strictly right going down
      - a leading entry's column is zero in every other row
    """
    leads: List[int] = []
    seen_zero_row = False
    for row in M:
        lead = leading_column(row)
        if lead is None:
            seen_zero_row = True
            continue
        if seen_zero_row:
            return False
        if not row[lead].is_one():
            return False
        if leads and lead <= leads[-1]:
            return False
        leads.append(lead)

    for i, lead in enumerate(leads):
        for r, row in enumerate(M):
            if r != i and not row[lead].is_zero():
                return False
    return True
