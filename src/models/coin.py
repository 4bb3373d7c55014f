import re

from pydantic import BaseModel, ConfigDict

from core.exceptions import DecodeError

# <amount><denom>, denoms as accepted by the bank module
COIN_PATTERN = re.compile(r"([0-9]+)([a-zA-Z][a-zA-Z0-9/:._-]{2,127})")


class DbCoin(BaseModel):
    """A coin amount as persisted: denomination plus integer amount."""

    model_config = ConfigDict(frozen=True)

    denom: str
    amount: int

    @classmethod
    def create(cls, denom: str, amount: int) -> "DbCoin":
        return cls(denom=denom, amount=amount)

    @classmethod
    def from_coin_string(cls, text: str) -> "DbCoin":
        match = COIN_PATTERN.fullmatch(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise DecodeError("coin", text, "expected <amount><denom>")
        return cls(denom=match.group(2), amount=int(match.group(1)))

    def to_coin_string(self) -> str:
        return f"{self.amount}{self.denom}"

    def equal(self, other: "DbCoin") -> bool:
        if not isinstance(other, DbCoin):
            return False
        return self.denom == other.denom and self.amount == other.amount

    def to_json(self) -> dict:
        # amount as text so values beyond 2**53 survive JSON round trips
        return {"denom": self.denom, "amount": str(self.amount)}

    @classmethod
    def from_json(cls, data: dict) -> "DbCoin":
        return cls(denom=data["denom"], amount=int(data["amount"]))
