from datetime import datetime

from sqlalchemy import BigInteger
from sqlmodel import Field

from models.base import SnapshotRow
from models.column_types import UTCDateTime


class StakingPoolRow(SnapshotRow, table=True):
    """Chain wide bonded and not bonded token totals at a height."""

    __tablename__ = "staking_pool"

    height: int = Field(
        primary_key=True, sa_type=BigInteger, sa_column_kwargs={"autoincrement": False}
    )
    bonded_tokens: int = Field(sa_type=BigInteger)
    not_bonded_tokens: int = Field(sa_type=BigInteger)
    timestamp: datetime = Field(sa_type=UTCDateTime)

    @classmethod
    def create(
        cls, bonded_tokens: int, not_bonded_tokens: int, height: int, timestamp: datetime
    ) -> "StakingPoolRow":
        return cls(
            bonded_tokens=bonded_tokens,
            not_bonded_tokens=not_bonded_tokens,
            height=height,
            timestamp=timestamp,
        )
