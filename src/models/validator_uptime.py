from sqlalchemy import BigInteger
from sqlmodel import Field

from models.base import SnapshotRow


class ValidatorUptimeRow(SnapshotRow, table=True):
    __tablename__ = "validator_uptime"

    consensus_address: str = Field(primary_key=True)
    height: int = Field(primary_key=True, sa_type=BigInteger)
    signed_blocks_window: int = Field(sa_type=BigInteger)
    missed_blocks_counter: int = Field(sa_type=BigInteger)

    @classmethod
    def create(
        cls,
        consensus_address: str,
        signed_blocks_window: int,
        missed_blocks_counter: int,
        height: int,
    ) -> "ValidatorUptimeRow":
        return cls(
            consensus_address=consensus_address,
            signed_blocks_window=signed_blocks_window,
            missed_blocks_counter=missed_blocks_counter,
            height=height,
        )
