"""Collectible tokens ("coins")."""

from __future__ import annotations

import re
from dataclasses import dataclass

from geocoin.core.cells import GridCell

_LABEL_RE = re.compile(r"^(-?\d+):(-?\d+)#(\d+)$")


@dataclass(frozen=True, slots=True)
class Token:
    """One collectible unit minted at ``cell`` with a per-cell serial.

    Identity is the value triple (i, j, serial); two Token objects with the
    same triple are the same token wherever they were allocated.
    """

    cell: GridCell
    serial: int

    @property
    def label(self) -> str:
        return f"{self.cell.i}:{self.cell.j}#{self.serial}"

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, label: str) -> Token:
        """Build a token from its ``i:j#serial`` label."""
        m = _LABEL_RE.match(label.strip())
        if m is None:
            raise ValueError(f"Malformed token label: {label!r}")
        return cls(GridCell(int(m.group(1)), int(m.group(2))), int(m.group(3)))


def mint_tokens(cell: GridCell, count: int) -> list[Token]:
    """Mint ``count`` fresh tokens at ``cell`` with dense serials 0..count-1."""
    return [Token(cell, serial) for serial in range(count)]
