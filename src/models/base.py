import math
from datetime import datetime, timezone

from sqlmodel import SQLModel


def _as_instant(value):
    # naive timestamps are read as UTC, the same way UTCDateTime stores them
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _field_equal(a, b) -> bool:
    if a is None or b is None:
        # absent only matches absent, "" is a present value
        return a is None and b is None
    if hasattr(a, "equal"):
        return a.equal(b)
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a):
        return math.isnan(b)
    # aware datetimes compare as instants, whatever their offset
    return _as_instant(a) == _as_instant(b)


class SnapshotRow(SQLModel):
    """Base of every persisted row.

    Rows are written once per observed height and never updated; a later
    snapshot supersedes an earlier one without touching it.
    """

    def equal(self, other) -> bool:
        """Tell whether ``self`` and ``other`` hold the same data.

        Fields compare by value. Timestamps compare as instants, so the same
        moment expressed in two offsets is equal, and a naive timestamp is
        taken to be UTC. Coin amounts compare by denomination and amount.
        """
        if type(self) is not type(other):
            return False
        return all(
            _field_equal(getattr(self, name), getattr(other, name))
            for name in type(self).model_fields
        )
