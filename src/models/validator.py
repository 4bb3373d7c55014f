from sqlmodel import Field

from models.base import SnapshotRow


class ValidatorRow(SnapshotRow, table=True):
    """Consensus identity of a validator, fixed once registered."""

    __tablename__ = "validator"

    consensus_address: str = Field(primary_key=True)
    consensus_pubkey: str = Field(unique=True)

    @classmethod
    def create(cls, consensus_address: str, consensus_pubkey: str) -> "ValidatorRow":
        return cls(consensus_address=consensus_address, consensus_pubkey=consensus_pubkey)


class ValidatorInfoRow(SnapshotRow, table=True):
    """Registration time parameters of a validator.

    ``max_change_rate`` and ``max_rate`` keep the raw scaled integer string
    the chain reports, see ``ValidatorData`` for the decoded values.
    """

    __tablename__ = "validator_info"

    consensus_address: str = Field(foreign_key="validator.consensus_address", unique=True)
    operator_address: str = Field(primary_key=True)
    self_delegate_address: str = Field(index=True)
    max_change_rate: str
    max_rate: str

    @classmethod
    def create(
        cls,
        consensus_address: str,
        operator_address: str,
        self_delegate_address: str,
        max_change_rate: str,
        max_rate: str,
    ) -> "ValidatorInfoRow":
        return cls(
            consensus_address=consensus_address,
            operator_address=operator_address,
            self_delegate_address=self_delegate_address,
            max_change_rate=max_change_rate,
            max_rate=max_rate,
        )
