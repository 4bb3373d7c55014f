from sqlmodel import SQLModel
from .coin import DbCoin
from .base import SnapshotRow
from .staking_pool import StakingPoolRow
from .validator import ValidatorRow, ValidatorInfoRow
from .validator_data import ValidatorData
from .validator_uptime import ValidatorUptimeRow
from .validator_delegation import (
    ValidatorDelegationRow,
    ValidatorUnbondingDelegationRow,
    ValidatorReDelegationRow,
    ValidatorDelegationSharesRow,
)
from .validator_commission import ValidatorCommissionRow
from .validator_voting_power import ValidatorVotingPowerRow
from .validator_description import ValidatorDescriptionRow
