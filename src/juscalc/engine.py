"""
Calculation engine.

    compute(kind, input_record) -> result_record

Coerces the input record with the kind's field schema, calls the formula
from the catalog and flattens its result dataclass into an ordered dict.
Pure: no I/O, no shared mutable state.

Results never carry NaN or infinity: an amount that overflows the float
range saturates to the largest float of its sign, and an undefined one
(infinity minus infinity) becomes 0.
"""

import logging
import math
from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional

from .calculators.common import clamp_finite
from .catalog import get_entry
from .config import EngineConfig

logger = logging.getLogger(__name__)

InputRecord = Mapping[str, Any]
ResultRecord = Dict[str, Any]


def _finite_field(kind: Any, name: str, value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        clamped = clamp_finite(value)
        logger.debug("%s.%s=%r out of range, using %r", kind.value, name, value, clamped)
        return clamped
    return value


def coerce_input(
    kind: Any,
    input_record: Optional[InputRecord] = None,
    config: Optional[EngineConfig] = None,
) -> Dict[str, Any]:
    """
    Apply the form-layer coercion for a kind.

    Unknown keys are dropped; every schema field is present in the output.

    Raises:
        UnknownCalculationError: if kind is not in the catalog
    """
    entry = get_entry(kind)
    config = config or EngineConfig()
    input_record = input_record or {}
    return {
        spec.name: spec.coerce(input_record.get(spec.name), config)
        for spec in entry.fields
    }


def compute(
    kind: Any,
    input_record: Optional[InputRecord] = None,
    config: Optional[EngineConfig] = None,
) -> ResultRecord:
    """
    Run a calculation.

    Args:
        kind: CalculationKind, its value, or a legacy dashboard id
        input_record: Raw field values; missing or malformed values take
            the field default
        config: Reference values (minimum wage, monthly hours, index rates)

    Returns:
        Ordered result record ending with "total"

    Raises:
        UnknownCalculationError: if kind is not in the catalog
    """
    entry = get_entry(kind)
    config = config or EngineConfig()

    arguments = coerce_input(entry.kind, input_record, config)
    for keyword, attribute in entry.config_args:
        arguments[keyword] = getattr(config, attribute)

    result = {
        name: _finite_field(entry.kind, name, value)
        for name, value in asdict(entry.formula(**arguments)).items()
    }
    logger.debug("Computed %s: total=%r", entry.kind.value, result["total"])
    return result
