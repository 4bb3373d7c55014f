import re
from decimal import Decimal

from core import constants
from core.config import settings
from core.exceptions import DecodeError

INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def parse_int64(text: str, field: str = "integer") -> int:
    """Parse a strict base-10 int64 literal.

    Only an optional sign followed by ASCII digits is accepted, so values
    such as ``" 1"``, ``"1_000"`` or ``"0x10"`` are rejected.
    """
    if not isinstance(text, str) or not INT_LITERAL.fullmatch(text):
        raise DecodeError(field, text, "not a base-10 integer literal")

    value = int(text)
    if value < constants.INT64_MIN or value > constants.INT64_MAX:
        raise DecodeError(field, text, "value out of int64 range")
    return value


def dec_from_raw(raw: int, precision: int | None = None) -> Decimal:
    """Build the fixed point decimal whose scaled integer is ``raw``.

    The chain stores decimals as integers scaled by 10**precision,
    e.g. raw 200000000000000000 at 18 places is 0.2.
    """
    if precision is None:
        precision = settings.DECIMAL_PRECISION
    # string construction keeps every digit, no context rounding applies
    return Decimal(f"{raw}E-{precision}")


def parse_dec(text: str, field: str = "decimal") -> Decimal:
    return dec_from_raw(parse_int64(text, field))
