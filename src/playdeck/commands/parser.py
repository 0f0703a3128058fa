"""Deterministic query parser."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Query(BaseModel):
    """Normalized free-text query split into command keyword and argument."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    raw: str
    command: str = ""
    argument: str = ""

    @property
    def text(self) -> str:
        """Full query text without surrounding whitespace."""
        return self.raw.strip()


def parse_query(text: str) -> Query:
    """Split raw input into a case-normalized command and its argument.

    Args:
        text: Raw user input string.

    Returns:
        Parsed query. Blank input yields an empty command.
    """
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return Query(raw=text)
    command = parts[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else ""
    return Query(raw=text, command=command, argument=argument)
