import logging
from decimal import Decimal

from sqlmodel import SQLModel

from core.config import settings
from core.exceptions import DecodeError
from models.validator import ValidatorInfoRow, ValidatorRow
from utils.bech32_utils import AccAddress, ConsAddress, ValAddress
from utils.crypto_utils import PubKey, pubkey_from_bech32
from utils.decimal_utils import parse_dec

logger = logging.getLogger(__name__)


class ValidatorData(SQLModel):
    """All the stored data of a single validator, identity joined with info.

    Fields mirror the stored strings byte for byte. The ``get_*`` accessors
    decode them into chain values on demand and raise ``DecodeError`` when
    the stored value is malformed. Such a failure is a data integrity
    violation, callers should let it abort the operation at hand.
    """

    consensus_address: str
    operator_address: str
    consensus_pubkey: str
    self_delegate_address: str
    max_rate: str
    max_change_rate: str

    @classmethod
    def create(
        cls,
        consensus_address: str,
        operator_address: str,
        consensus_pubkey: str,
        self_delegate_address: str,
        max_rate: str,
        max_change_rate: str,
    ) -> "ValidatorData":
        return cls(
            consensus_address=consensus_address,
            operator_address=operator_address,
            consensus_pubkey=consensus_pubkey,
            self_delegate_address=self_delegate_address,
            max_rate=max_rate,
            max_change_rate=max_change_rate,
        )

    @classmethod
    def from_rows(cls, validator: ValidatorRow, info: ValidatorInfoRow) -> "ValidatorData":
        if validator.consensus_address != info.consensus_address:
            raise ValueError(
                f"validator {validator.consensus_address} does not match info "
                f"row of {info.consensus_address}"
            )
        return cls.create(
            validator.consensus_address,
            info.operator_address,
            validator.consensus_pubkey,
            info.self_delegate_address,
            info.max_rate,
            info.max_change_rate,
        )

    def equal(self, other: "ValidatorData") -> bool:
        if not isinstance(other, ValidatorData):
            return False
        return all(
            getattr(self, name) == getattr(other, name)
            for name in type(self).model_fields
        )

    def _decode(self, field: str, decoder):
        try:
            return decoder(getattr(self, field))
        except DecodeError:
            logger.error(
                f"Corrupted {field} {getattr(self, field)!r} stored for validator "
                f"{self.operator_address}"
            )
            raise

    def get_cons_addr(self) -> ConsAddress:
        return self._decode("consensus_address", ConsAddress.from_bech32)

    def get_cons_pub_key(self) -> PubKey:
        return self._decode(
            "consensus_pubkey",
            lambda text: pubkey_from_bech32(settings.BECH32_CONS_PUB_PREFIX, text),
        )

    def get_operator(self) -> ValAddress:
        return self._decode("operator_address", ValAddress.from_bech32)

    def get_self_delegate_address(self) -> AccAddress:
        return self._decode("self_delegate_address", AccAddress.from_bech32)

    def get_max_rate(self) -> Decimal:
        return self._decode("max_rate", lambda text: parse_dec(text, "max rate"))

    def get_max_change_rate(self) -> Decimal:
        return self._decode(
            "max_change_rate", lambda text: parse_dec(text, "max change rate")
        )
