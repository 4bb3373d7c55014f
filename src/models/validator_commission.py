from datetime import datetime

from sqlalchemy import BigInteger
from sqlmodel import Field

from models.base import SnapshotRow
from models.column_types import UTCDateTime


class ValidatorCommissionRow(SnapshotRow, table=True):
    """Commission state of a validator at a height.

    ``None`` means the chain did not report the value, which is not the same
    as an empty string.
    """

    __tablename__ = "validator_commission"

    operator_address: str = Field(primary_key=True)
    timestamp: datetime = Field(sa_type=UTCDateTime)
    commission: str | None = Field(default=None, nullable=True)
    min_self_delegation: str | None = Field(default=None, nullable=True)
    height: int = Field(primary_key=True, sa_type=BigInteger)

    @classmethod
    def create(
        cls,
        operator_address: str,
        commission: str | None,
        min_self_delegation: str | None,
        height: int,
        timestamp: datetime,
    ) -> "ValidatorCommissionRow":
        return cls(
            operator_address=operator_address,
            commission=commission,
            min_self_delegation=min_self_delegation,
            height=height,
            timestamp=timestamp,
        )
