"""
Error types raised by juscalc.

Malformed user input is never an error: it is coerced to the field default.
Only programming mistakes (an unknown calculation kind) and history lookups
raise.
"""


class JuscalcError(Exception):
    """Base class for juscalc errors."""


class UnknownCalculationError(JuscalcError, ValueError):
    """Raised when a calculation kind is not in the catalog."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown calculation kind: {kind!r}")


class HistoryEntryNotFoundError(JuscalcError, KeyError):
    """Raised when a history entry id does not exist."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"History entry not found: {entry_id}")

    def __str__(self) -> str:
        return self.args[0]
