from datetime import datetime

from sqlalchemy import BigInteger
from sqlmodel import Field

from models.base import SnapshotRow
from models.column_types import UTCDateTime


class ValidatorDescriptionRow(SnapshotRow, table=True):
    __tablename__ = "validator_description"

    operator_address: str = Field(primary_key=True)
    moniker: str | None = Field(default=None, nullable=True)
    identity: str | None = Field(default=None, nullable=True)
    website: str | None = Field(default=None, nullable=True)
    security_contact: str | None = Field(default=None, nullable=True)
    details: str | None = Field(default=None, nullable=True)
    height: int = Field(primary_key=True, sa_type=BigInteger)
    timestamp: datetime = Field(sa_type=UTCDateTime)

    @classmethod
    def create(
        cls,
        operator_address: str,
        moniker: str | None,
        identity: str | None,
        website: str | None,
        security_contact: str | None,
        details: str | None,
        height: int,
        timestamp: datetime,
    ) -> "ValidatorDescriptionRow":
        return cls(
            operator_address=operator_address,
            moniker=moniker,
            identity=identity,
            website=website,
            security_contact=security_contact,
            details=details,
            height=height,
            timestamp=timestamp,
        )
