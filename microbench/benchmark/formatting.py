"""
Duration formatting for benchmark results.

Durations are integer nanosecond counts. They are rendered either as a
natural multi-unit string ("1ms 259µs 42ns") or, when a unit is forced,
as a fixed two-decimal value ("104.90 ms").
"""

import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List, Optional, Tuple, Union

from ..exceptions import ConfigurationError

Number = Union[int, float]

NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_SEC = 1_000_000_000
NS_PER_MIN = 60 * NS_PER_SEC
NS_PER_HR = 60 * NS_PER_MIN
NS_PER_DAY = 24 * NS_PER_HR
NS_PER_WK = 7 * NS_PER_DAY

# Largest to smallest, used for natural decomposition
COMPONENT_UNITS: List[Tuple[str, int]] = [
    ("wk", NS_PER_WK),
    ("day", NS_PER_DAY),
    ("hr", NS_PER_HR),
    ("min", NS_PER_MIN),
    ("sec", NS_PER_SEC),
    ("ms", NS_PER_MS),
    ("µs", NS_PER_US),
    ("ns", 1),
]

# Units accepted for fixed-unit rendering
FIXED_UNITS: Dict[str, int] = {
    "ns": 1,
    "µs": NS_PER_US,
    "ms": NS_PER_MS,
    "sec": NS_PER_SEC,
    "min": NS_PER_MIN,
}

UNIT_ALIASES: Dict[str, str] = {
    "us": "µs",
}

_ALL_UNITS: Dict[str, int] = {**dict(COMPONENT_UNITS), "us": NS_PER_US}
_COMPONENT = r"(\d+(?:\.\d+)?)\s*(wk|day|hr|min|sec|ms|µs|us|ns)"
_COMPONENT_RE = re.compile(_COMPONENT)
_DURATION_RE = re.compile(rf"\s*(?:{_COMPONENT}\s*)+")

_TWO_PLACES = Decimal("0.01")


def resolve_unit(token: str) -> str:
    """
    Map a unit token to its canonical name.

    Args:
        token: One of ns, us, µs, ms, sec, min

    Returns:
        Canonical unit name ("us" becomes "µs")

    Raises:
        ConfigurationError: If the token is not a supported unit
    """
    normalized = (token or "").strip().lower()
    unit = UNIT_ALIASES.get(normalized, normalized)
    if unit not in FIXED_UNITS:
        accepted = list(FIXED_UNITS) + list(UNIT_ALIASES)
        raise ConfigurationError(
            f"Invalid units '{token}'. Expected one of: {', '.join(accepted)}",
            {"units": token},
        )
    return unit


def round_significant(value: Number, digits: int) -> Number:
    """
    Keep the first ``digits`` significant digits of ``value``.

    The remaining digits are zeroed, e.g. 1234567 with 4 digits becomes
    1235000. Ties round half up. ``digits == 0`` returns the value unchanged.
    """
    if digits < 0:
        raise ValueError(f"Significant digits must be >= 0, got {digits}")
    if digits == 0 or value == 0:
        return value

    exact = Decimal(value)
    # A carry can add one digit to the quantized coefficient
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 1)
        quantum = Decimal(1).scaleb(exact.adjusted() - digits + 1)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_duration(
    ns: Number,
    units: Optional[str] = None,
    sign_digits: int = 0,
) -> str:
    """
    Format a nanosecond count as a human-readable duration.

    Args:
        ns: Non-negative nanosecond count (fractions are truncated after rounding)
        units: Force a single unit (ns, us/µs, ms, sec, min) instead of
            the natural multi-unit form
        sign_digits: Significant digits to keep, 0 disables rounding

    Returns:
        Formatted duration string
    """
    if ns < 0:
        raise ValueError(f"Duration must be non-negative, got {ns}")

    # Round the raw magnitude before decomposing, the unit boundaries
    # depend on the rounded value
    if sign_digits:
        ns = round_significant(ns, sign_digits)
    ns = int(ns)

    if units is None:
        return _decompose(ns)

    unit = resolve_unit(units)
    value = (Decimal(ns) / FIXED_UNITS[unit]).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    return f"{value} {unit}"


def _decompose(ns: int) -> str:
    """Split ns into its non-zero unit components."""
    if ns == 0:
        return "0ns"

    parts = []
    remaining = ns
    for name, size in COMPONENT_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{name}")
    return " ".join(parts)


def parse_duration(text: str) -> int:
    """
    Parse a formatted duration back into whole nanoseconds.

    Accepts both the natural form ("1ms 259µs 42ns") and the fixed form
    ("104.90 ms"). The fixed form only recovers two decimals of its unit.

    Raises:
        ValueError: If the text is not a duration
    """
    if not text or not _DURATION_RE.fullmatch(text):
        raise ValueError(f"Not a duration: {text!r}")

    total = Decimal(0)
    for amount, unit in _COMPONENT_RE.findall(text):
        total += Decimal(amount) * _ALL_UNITS[unit]
    return int(total)
