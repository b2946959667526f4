"""
juscalc: legal and financial calculations for the lawyer dashboard.

Pure formulas (severance pay, overtime, monetary correction, child support,
contribution time, ...) behind a static catalog, with pt-BR presentation
helpers and an optional calculation history.
"""

from .catalog import (
    CATALOG,
    CalculationKind,
    CatalogEntry,
    Category,
    FieldSpec,
    entries_by_category,
    get_entry,
    resolve_kind,
)
from .config import EngineConfig
from .engine import coerce_input, compute
from .exceptions import HistoryEntryNotFoundError, JuscalcError, UnknownCalculationError
from .history import HistoryEntry, InMemoryHistoryStore, JsonFileHistoryStore
from .presenter import format_currency, format_value, render, render_text
from .rates import MonetaryIndex, MonetaryIndexRateProvider, SimulatedIndexRates

__version__ = "0.1.0"
__all__ = [
    "compute",
    "coerce_input",
    "CATALOG",
    "CalculationKind",
    "CatalogEntry",
    "Category",
    "FieldSpec",
    "get_entry",
    "resolve_kind",
    "entries_by_category",
    "EngineConfig",
    "MonetaryIndex",
    "MonetaryIndexRateProvider",
    "SimulatedIndexRates",
    "format_currency",
    "format_value",
    "render",
    "render_text",
    "HistoryEntry",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "JuscalcError",
    "UnknownCalculationError",
    "HistoryEntryNotFoundError",
]
