"""The player's token inventory."""

from __future__ import annotations

from dataclasses import dataclass, field

from geocoin.core.tokens import Token


@dataclass(slots=True)
class PlayerInventory:
    """Ordered tokens held by the player, oldest first."""

    tokens: list[Token] = field(default_factory=list)

    @property
    def latest(self) -> Token | None:
        """Most recently acquired token, the one offered for deposit."""
        return self.tokens[-1] if self.tokens else None

    @property
    def status(self) -> str:
        if not self.tokens:
            return "No coins yet..."
        return f"{len(self.tokens)} coins accumulated"

    def add_token(self, token: Token) -> None:
        self.tokens.append(token)

    def remove_token(self, token: Token) -> bool:
        if token in self.tokens:
            self.tokens.remove(token)
            return True
        return False

    def clear(self) -> None:
        self.tokens.clear()

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens
