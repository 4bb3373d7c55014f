from datetime import datetime

from sqlalchemy import BigInteger
from sqlmodel import Field

from models.base import SnapshotRow
from models.coin import DbCoin
from models.column_types import CoinType, UTCDateTime


class ValidatorDelegationRow(SnapshotRow, table=True):
    __tablename__ = "validator_delegation"

    consensus_address: str = Field(primary_key=True)
    delegator_address: str = Field(primary_key=True)
    amount: DbCoin = Field(sa_type=CoinType)
    height: int = Field(primary_key=True, sa_type=BigInteger)
    timestamp: datetime = Field(sa_type=UTCDateTime)

    @classmethod
    def create(
        cls,
        consensus_address: str,
        delegator_address: str,
        amount: DbCoin,
        height: int,
        timestamp: datetime,
    ) -> "ValidatorDelegationRow":
        return cls(
            consensus_address=consensus_address,
            delegator_address=delegator_address,
            amount=amount,
            height=height,
            timestamp=timestamp,
        )


class ValidatorUnbondingDelegationRow(SnapshotRow, table=True):
    __tablename__ = "validator_unbonding_delegation"

    consensus_address: str = Field(primary_key=True)
    delegator_address: str = Field(primary_key=True)
    amount: DbCoin = Field(sa_type=CoinType)
    completion_timestamp: datetime = Field(primary_key=True, sa_type=UTCDateTime)
    height: int = Field(primary_key=True, sa_type=BigInteger)
    timestamp: datetime = Field(sa_type=UTCDateTime)

    @classmethod
    def create(
        cls,
        consensus_address: str,
        delegator_address: str,
        amount: DbCoin,
        completion_timestamp: datetime,
        height: int,
        timestamp: datetime,
    ) -> "ValidatorUnbondingDelegationRow":
        return cls(
            consensus_address=consensus_address,
            delegator_address=delegator_address,
            amount=amount,
            completion_timestamp=completion_timestamp,
            height=height,
            timestamp=timestamp,
        )


class ValidatorReDelegationRow(SnapshotRow, table=True):
    __tablename__ = "validator_redelegation"

    delegator_address: str = Field(primary_key=True)
    src_validator_address: str = Field(primary_key=True)
    dst_validator_address: str = Field(primary_key=True)
    amount: DbCoin = Field(sa_type=CoinType)
    height: int = Field(primary_key=True, sa_type=BigInteger)
    completion_time: datetime = Field(primary_key=True, sa_type=UTCDateTime)

    @classmethod
    def create(
        cls,
        delegator_address: str,
        src_validator_address: str,
        dst_validator_address: str,
        amount: DbCoin,
        height: int,
        completion_time: datetime,
    ) -> "ValidatorReDelegationRow":
        return cls(
            delegator_address=delegator_address,
            src_validator_address=src_validator_address,
            dst_validator_address=dst_validator_address,
            amount=amount,
            height=height,
            completion_time=completion_time,
        )


class ValidatorDelegationSharesRow(SnapshotRow, table=True):
    """Raw share count a delegator holds with a validator at a height."""

    __tablename__ = "validator_delegation_shares"

    operator_address: str = Field(primary_key=True)
    delegator_address: str = Field(primary_key=True)
    shares: float
    timestamp: datetime = Field(sa_type=UTCDateTime)
    height: int = Field(primary_key=True, sa_type=BigInteger)

    @classmethod
    def create(
        cls,
        operator_address: str,
        delegator_address: str,
        shares: float,
        timestamp: datetime,
        height: int,
    ) -> "ValidatorDelegationSharesRow":
        return cls(
            operator_address=operator_address,
            delegator_address=delegator_address,
            shares=shares,
            timestamp=timestamp,
            height=height,
        )
