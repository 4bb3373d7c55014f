import math
from datetime import timedelta

import pytest

from chain_fixtures import (
    TIMESTAMP,
    TIMESTAMP_CEST,
    account_address,
    cons_address,
    cons_pubkey,
    operator_address,
)
from models import (
    DbCoin,
    StakingPoolRow,
    ValidatorCommissionRow,
    ValidatorDelegationRow,
    ValidatorDelegationSharesRow,
    ValidatorDescriptionRow,
    ValidatorInfoRow,
    ValidatorReDelegationRow,
    ValidatorRow,
    ValidatorUnbondingDelegationRow,
    ValidatorUptimeRow,
    ValidatorVotingPowerRow,
)

LATER = TIMESTAMP + timedelta(microseconds=1)
OTHER_OPERATOR = operator_address(bytes(range(50, 70)))
OTHER_ACCOUNT = account_address(bytes(range(70, 90)))

# row class, constructor values, and one differing value per field
ROW_SAMPLES = [
    (
        StakingPoolRow,
        dict(bonded_tokens=1_000_000, not_bonded_tokens=500_000, height=100, timestamp=TIMESTAMP),
        dict(bonded_tokens=1_000_001, not_bonded_tokens=0, height=101, timestamp=LATER),
    ),
    (
        ValidatorRow,
        dict(consensus_address=cons_address(), consensus_pubkey=cons_pubkey()),
        dict(consensus_address="cosmosvalcons1other", consensus_pubkey="cosmosvalconspub1other"),
    ),
    (
        ValidatorInfoRow,
        dict(
            consensus_address=cons_address(),
            operator_address=operator_address(),
            self_delegate_address=account_address(),
            max_change_rate="10000000000000000",
            max_rate="200000000000000000",
        ),
        dict(
            consensus_address="cosmosvalcons1other",
            operator_address=OTHER_OPERATOR,
            self_delegate_address=OTHER_ACCOUNT,
            max_change_rate="20000000000000000",
            max_rate="300000000000000000",
        ),
    ),
    (
        ValidatorUptimeRow,
        dict(
            consensus_address=cons_address(),
            signed_blocks_window=10_000,
            missed_blocks_counter=3,
            height=100,
        ),
        dict(
            consensus_address="cosmosvalcons1other",
            signed_blocks_window=20_000,
            missed_blocks_counter=4,
            height=101,
        ),
    ),
    (
        ValidatorDelegationRow,
        dict(
            consensus_address=cons_address(),
            delegator_address=account_address(),
            amount=DbCoin.create("stake", 1_000),
            height=100,
            timestamp=TIMESTAMP,
        ),
        dict(
            consensus_address="cosmosvalcons1other",
            delegator_address=OTHER_ACCOUNT,
            amount=DbCoin.create("uatom", 1_000),
            height=101,
            timestamp=LATER,
        ),
    ),
    (
        ValidatorUnbondingDelegationRow,
        dict(
            consensus_address=cons_address(),
            delegator_address=account_address(),
            amount=DbCoin.create("stake", 1_000),
            completion_timestamp=TIMESTAMP + timedelta(days=21),
            height=100,
            timestamp=TIMESTAMP,
        ),
        dict(
            consensus_address="cosmosvalcons1other",
            delegator_address=OTHER_ACCOUNT,
            amount=DbCoin.create("stake", 999),
            completion_timestamp=TIMESTAMP + timedelta(days=22),
            height=101,
            timestamp=LATER,
        ),
    ),
    (
        ValidatorReDelegationRow,
        dict(
            delegator_address=account_address(),
            src_validator_address=cons_address(),
            dst_validator_address="cosmosvalcons1dst",
            amount=DbCoin.create("stake", 1_000),
            height=100,
            completion_time=TIMESTAMP,
        ),
        dict(
            delegator_address=OTHER_ACCOUNT,
            src_validator_address="cosmosvalcons1src",
            dst_validator_address="cosmosvalcons1other",
            amount=DbCoin.create("stake", 1_001),
            height=101,
            completion_time=LATER,
        ),
    ),
    (
        ValidatorCommissionRow,
        dict(
            operator_address=operator_address(),
            commission="100000000000000000",
            min_self_delegation="1",
            height=100,
            timestamp=TIMESTAMP,
        ),
        dict(
            operator_address=OTHER_OPERATOR,
            commission=None,
            min_self_delegation="",
            height=101,
            timestamp=LATER,
        ),
    ),
    (
        ValidatorDelegationSharesRow,
        dict(
            operator_address=operator_address(),
            delegator_address=account_address(),
            shares=1000.5,
            timestamp=TIMESTAMP,
            height=100,
        ),
        dict(
            operator_address=OTHER_OPERATOR,
            delegator_address=OTHER_ACCOUNT,
            shares=1000.25,
            timestamp=LATER,
            height=101,
        ),
    ),
    (
        ValidatorVotingPowerRow,
        dict(consensus_address=cons_address(), voting_power=42, height=100),
        dict(consensus_address="cosmosvalcons1other", voting_power=43, height=101),
    ),
    (
        ValidatorDescriptionRow,
        dict(
            operator_address=operator_address(),
            moniker="Alice",
            identity="ABCDEF0123456789",
            website="https://alice.example",
            security_contact="sec@alice.example",
            details="validating since genesis",
            height=100,
            timestamp=TIMESTAMP,
        ),
        dict(
            operator_address=OTHER_OPERATOR,
            moniker=None,
            identity="",
            website=None,
            security_contact="",
            details=None,
            height=101,
            timestamp=LATER,
        ),
    ),
]

SAMPLE_IDS = [sample[0].__name__ for sample in ROW_SAMPLES]

FIELD_CASES = [
    (row_cls, values, field, alternate)
    for row_cls, values, alternates in ROW_SAMPLES
    for field, alternate in alternates.items()
]
FIELD_IDS = [f"{case[0].__name__}.{case[2]}" for case in FIELD_CASES]


@pytest.mark.parametrize("row_cls, values, alternates", ROW_SAMPLES, ids=SAMPLE_IDS)
def test_constructor_keeps_values(row_cls, values, alternates):
    row = row_cls.create(*values.values())
    for field, value in values.items():
        assert getattr(row, field) == value
        assert type(getattr(row, field)) is type(value)


@pytest.mark.parametrize("row_cls, values, alternates", ROW_SAMPLES, ids=SAMPLE_IDS)
def test_create_matches_keyword_constructor(row_cls, values, alternates):
    assert row_cls.create(*values.values()).equal(row_cls(**values))


@pytest.mark.parametrize("row_cls, values, alternates", ROW_SAMPLES, ids=SAMPLE_IDS)
def test_equal_is_an_equivalence(row_cls, values, alternates):
    a = row_cls(**values)
    b = row_cls(**values)
    c = row_cls(**values)

    assert a.equal(a)
    assert a.equal(b) and b.equal(a)
    assert b.equal(c) and a.equal(c)


@pytest.mark.parametrize("row_cls, values, field, alternate", FIELD_CASES, ids=FIELD_IDS)
def test_equal_is_field_sensitive(row_cls, values, field, alternate):
    changed = dict(values, **{field: alternate})
    a = row_cls(**values)
    b = row_cls(**changed)

    assert not a.equal(b)
    assert not b.equal(a)


def test_rows_of_different_kinds_are_never_equal():
    uptime = ValidatorUptimeRow.create(cons_address(), 100, 0, 10)
    power = ValidatorVotingPowerRow.create(cons_address(), 100, 10)

    assert not uptime.equal(power)
    assert not uptime.equal(None)


def test_staking_pool_equal_scenario():
    first = StakingPoolRow.create(1_000_000, 500_000, 100, TIMESTAMP)
    second = StakingPoolRow.create(1_000_000, 500_000, 100, TIMESTAMP)
    assert first.equal(second)

    later = StakingPoolRow.create(1_000_000, 500_000, 101, TIMESTAMP)
    assert not first.equal(later)


def test_timestamps_compare_as_instants():
    utc = StakingPoolRow.create(1, 2, 3, TIMESTAMP)
    cest = StakingPoolRow.create(1, 2, 3, TIMESTAMP_CEST)

    assert utc.equal(cest)
    assert cest.equal(utc)


def test_timestamps_keep_microseconds():
    a = ValidatorDelegationSharesRow.create("op", "del", 1.0, TIMESTAMP, 1)
    b = ValidatorDelegationSharesRow.create(
        "op", "del", 1.0, TIMESTAMP.replace(microsecond=123457), 1
    )
    assert not a.equal(b)


def test_description_absent_moniker_differs_from_present():
    alice = ValidatorDescriptionRow.create(
        operator_address(), "Alice", None, None, None, None, 100, TIMESTAMP
    )
    unnamed = ValidatorDescriptionRow.create(
        operator_address(), None, None, None, None, None, 100, TIMESTAMP
    )
    assert not alice.equal(unnamed)
    assert not unnamed.equal(alice)


def test_absent_is_not_empty():
    absent = ValidatorCommissionRow.create(operator_address(), None, None, 100, TIMESTAMP)
    empty = ValidatorCommissionRow.create(operator_address(), "", "", 100, TIMESTAMP)

    assert absent.commission is None
    assert empty.commission == ""
    assert not absent.equal(empty)
    assert absent.equal(
        ValidatorCommissionRow.create(operator_address(), None, None, 100, TIMESTAMP)
    )


def test_coin_amount_needs_same_denom():
    atom = ValidatorDelegationRow.create(
        cons_address(), account_address(), DbCoin.create("uatom", 5), 1, TIMESTAMP
    )
    stake = ValidatorDelegationRow.create(
        cons_address(), account_address(), DbCoin.create("stake", 5), 1, TIMESTAMP
    )
    assert not atom.equal(stake)


def test_nan_shares_stay_reflexive():
    row = ValidatorDelegationSharesRow.create("op", "del", math.nan, TIMESTAMP, 1)
    assert row.equal(row)
    assert row.equal(ValidatorDelegationSharesRow.create("op", "del", math.nan, TIMESTAMP, 1))
    assert not row.equal(ValidatorDelegationSharesRow.create("op", "del", 1.0, TIMESTAMP, 1))


def test_naive_timestamps_are_read_as_utc():
    naive = StakingPoolRow.create(1, 2, 3, TIMESTAMP.replace(tzinfo=None))
    aware = StakingPoolRow.create(1, 2, 3, TIMESTAMP)
    cest = StakingPoolRow.create(1, 2, 3, TIMESTAMP_CEST)

    assert naive.equal(aware) and aware.equal(naive)
    assert naive.equal(cest)
    assert not naive.equal(StakingPoolRow.create(1, 2, 3, LATER.replace(tzinfo=None)))
