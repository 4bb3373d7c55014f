from sqlalchemy import BigInteger
from sqlmodel import Field

from models.base import SnapshotRow


class ValidatorVotingPowerRow(SnapshotRow, table=True):
    __tablename__ = "validator_voting_power"

    consensus_address: str = Field(primary_key=True)
    voting_power: int = Field(sa_type=BigInteger)
    height: int = Field(primary_key=True, sa_type=BigInteger)

    @classmethod
    def create(
        cls, consensus_address: str, voting_power: int, height: int
    ) -> "ValidatorVotingPowerRow":
        return cls(
            consensus_address=consensus_address,
            voting_power=voting_power,
            height=height,
        )
