"""Cache mementos: the serialized state carried across destroy/recreate cycles.

A memento is a small tagged record, not a free-form blob:

    {"kind": "cache", "version": 1,
     "position": {"i": 369894, "j": -1220628},
     "tokens": [{"i": 369894, "j": -1220628, "serial": 0}, ...]}

Token order is significant (stack discipline) and is preserved exactly.
Labels and other derived fields are not stored; they are recomputed on restore.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from geocoin.core.cells import GridCell
from geocoin.core.tokens import Token

if TYPE_CHECKING:
    from geocoin.core.cells import CellRegistry

MEMENTO_VERSION = 1


class CellRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    i: int
    j: int

    @classmethod
    def from_cell(cls, cell: GridCell) -> CellRecord:
        return cls(i=cell.i, j=cell.j)

    def to_cell(self, cells: CellRegistry | None = None) -> GridCell:
        if cells is not None:
            return cells.get_cell(self.i, self.j)
        return GridCell(self.i, self.j)


class TokenRecord(BaseModel):
    """A token reduced to its identity: origin cell and serial."""

    model_config = ConfigDict(frozen=True)

    i: int
    j: int
    serial: int = Field(ge=0)

    @classmethod
    def from_token(cls, token: Token) -> TokenRecord:
        return cls(i=token.cell.i, j=token.cell.j, serial=token.serial)

    def to_token(self, cells: CellRegistry | None = None) -> Token:
        cell = cells.get_cell(self.i, self.j) if cells is not None else GridCell(self.i, self.j)
        return Token(cell, self.serial)


class CacheMemento(BaseModel):
    """Snapshot of a cache's position and ordered token list."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cache"] = "cache"
    version: int = MEMENTO_VERSION
    position: CellRecord
    tokens: tuple[TokenRecord, ...] = ()

    @property
    def key(self) -> str:
        return f"{self.position.i},{self.position.j}"

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, raw: str | bytes) -> CacheMemento:
        """Decode a memento; pydantic.ValidationError on malformed input."""
        return cls.model_validate_json(raw)
