import bisect
import logging
from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Optional

from core.exceptions import SnapshotOrderError
from models.base import SnapshotRow

logger = logging.getLogger(__name__)


def row_height(row: SnapshotRow) -> int:
    """Height of a height keyed row.

    Identity rows such as ValidatorRow carry no height and cannot be
    versioned, they raise TypeError.
    """
    if "height" not in type(row).model_fields:
        raise TypeError(
            f"{type(row).__name__} has no height, it cannot form a snapshot history"
        )
    return row.height


class SnapshotHistory:
    """Append only, height ordered snapshots of one logical entity.

    Rows are never replaced. Re-appending a row equal to one already held
    at the same height is a no-op, which lets overlapping height ranges be
    ingested twice without duplicating history.
    """

    def __init__(self, rows: Iterable[SnapshotRow] = ()):
        self._rows: List[SnapshotRow] = []
        self._heights: List[int] = []
        for row in rows:
            self.append(row)

    def append(self, row: SnapshotRow) -> bool:
        height = row_height(row)
        if self._rows and height < self._heights[-1]:
            raise SnapshotOrderError(
                f"cannot append {type(row).__name__} at height {height}, "
                f"history is already at height {self._heights[-1]}"
            )

        start = bisect.bisect_left(self._heights, height)
        for existing in self._rows[start:]:
            if existing.equal(row):
                logger.debug(
                    f"Skipping duplicate {type(row).__name__} at height {height}"
                )
                return False

        self._rows.append(row)
        self._heights.append(height)
        return True

    def latest(self) -> Optional[SnapshotRow]:
        return self._rows[-1] if self._rows else None

    def at_height(self, height: int) -> Optional[SnapshotRow]:
        """Return the state as of ``height``: the last row at or below it."""
        index = bisect.bisect_right(self._heights, height)
        if index == 0:
            return None
        return self._rows[index - 1]

    def __iter__(self) -> Iterator[SnapshotRow]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)


def deduplicate(rows: Iterable[SnapshotRow]) -> List[SnapshotRow]:
    unique: List[SnapshotRow] = []
    for row in rows:
        if not any(kept.equal(row) for kept in unique):
            unique.append(row)
    return unique


def group_by_entity(
    rows: Iterable[SnapshotRow], key_fn: Callable[[SnapshotRow], Hashable]
) -> Dict[Hashable, SnapshotHistory]:
    histories: Dict[Hashable, SnapshotHistory] = {}
    # stable sort keeps the arrival order of rows sharing a height
    for row in sorted(rows, key=row_height):
        histories.setdefault(key_fn(row), SnapshotHistory()).append(row)
    return histories
