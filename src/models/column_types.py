from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime
from sqlalchemy.types import TypeDecorator

from models.coin import DbCoin


class UTCDateTime(TypeDecorator):
    """Timezone aware timestamp stored normalized to UTC.

    Backends without offset support (sqlite) hand back naive values, these
    are re-tagged as UTC so a stored instant compares equal to its source.
    Naive inputs are taken to be UTC already.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class CoinType(TypeDecorator):
    """DbCoin stored as a JSON {"denom", "amount"} document."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: DbCoin | None, dialect):
        if value is None:
            return None
        return value.to_json()

    def process_result_value(self, value: dict | None, dialect):
        if value is None:
            return None
        return DbCoin.from_json(value)
