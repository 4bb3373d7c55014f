from typing import Any, Optional

from pydantic import PostgresDsn, ValidationInfo, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    ENVIRONMENT_NAME: str = "Development"

    @property
    def is_production(self):
        return self.ENVIRONMENT_NAME == "Production"

    PROJECT_NAME: str = "staking-snapshot-store"
    LOG_LEVEL: str = "INFO"

    # Bech32 human readable parts. The validator prefixes follow the
    # cosmos-sdk convention of suffixing the account prefix.
    BECH32_ACC_ADDR_PREFIX: str = "cosmos"
    BECH32_VAL_ADDR_PREFIX: Optional[str] = None
    BECH32_CONS_ADDR_PREFIX: Optional[str] = None
    BECH32_CONS_PUB_PREFIX: Optional[str] = None

    @field_validator("BECH32_VAL_ADDR_PREFIX", mode="before")
    def assemble_val_prefix(cls, v: str | None, info: ValidationInfo) -> Any:
        if isinstance(v, str) and v:
            return v
        return f"{info.data.get('BECH32_ACC_ADDR_PREFIX')}valoper"

    @field_validator("BECH32_CONS_ADDR_PREFIX", mode="before")
    def assemble_cons_prefix(cls, v: str | None, info: ValidationInfo) -> Any:
        if isinstance(v, str) and v:
            return v
        return f"{info.data.get('BECH32_ACC_ADDR_PREFIX')}valcons"

    @field_validator("BECH32_CONS_PUB_PREFIX", mode="before")
    def assemble_cons_pub_prefix(cls, v: str | None, info: ValidationInfo) -> Any:
        if isinstance(v, str) and v:
            return v
        return f"{info.data.get('BECH32_ACC_ADDR_PREFIX')}valconspub"

    # number of fractional digits of the chain's fixed point decimals
    DECIMAL_PRECISION: int = 18

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "staking"
    SQLALCHEMY_DATABASE_URI: PostgresDsn | str | None = None

    @field_validator("SQLALCHEMY_DATABASE_URI", mode="before")
    def assemble_db_connection(cls, v: str | None, info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return v
        return PostgresDsn.build(
            scheme="postgresql+psycopg",
            username=info.data.get("POSTGRES_USER"),
            password=info.data.get("POSTGRES_PASSWORD"),
            host=info.data.get("POSTGRES_SERVER"),
            path=f"{info.data.get('POSTGRES_DB') or ''}",
        )

    # Seq log
    SEQ_SERVER_URL: Optional[str] = None
    SEQ_SERVER_API_KEY: Optional[str] = None

    class Config:

        case_sensitive = True
        env_file = ".env"
        extra = "allow"


settings = Settings()
