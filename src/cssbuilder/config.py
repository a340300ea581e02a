from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    descendant_token: str = "_"  # stands for the " " combinator on the command line
    combinators: tuple[str, ...] = ("+", "~", ">")

    def combinator_for(self, token: str) -> str | None:
        """Map a command-line token to a combinator, or ``None`` if it is not one."""
        if token == self.descendant_token:
            return " "
        if token in self.combinators:
            return token
        return None
