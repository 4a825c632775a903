from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from harbor_api.utils.constants import DEFAULT_BASE_ADDRESS

LogLevelType = Literal["ERROR", "WARNING", "INFO", "DEBUG", "CRITICAL"]


class ClientConfig(BaseModel):
    """
    Connection settings of a single Harbor client

    The model is frozen, a client keeps the instance it was built with for its
    whole lifetime.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_address: str = DEFAULT_BASE_ADDRESS
    principal: str = Field(min_length=1)
    credential: SecretStr
    timeout: Optional[float] = Field(default=None, gt=0)
    verify_ssl: bool = True

    @field_validator("base_address")
    @classmethod
    def base_address_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("base_address cannot be empty")
        return value

    @field_validator("principal")
    @classmethod
    def principal_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("principal is required")
        return value

    @field_validator("credential")
    @classmethod
    def credential_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("credential is required")
        return value


class HarborSettings(BaseSettings):
    """
    HARBOR_* environment variables, optionally read from a `.env` file

    `log_level` is not applied by the client, pass it to
    `harbor_api.log.setup_logger` when the application owns the sinks.
    """

    model_config = SettingsConfigDict(
        env_prefix="HARBOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_address: str = DEFAULT_BASE_ADDRESS
    username: str
    password: SecretStr
    timeout: Optional[float] = None
    verify_ssl: bool = True
    log_level: LogLevelType = "INFO"

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            base_address=self.base_address,
            principal=self.username,
            credential=self.password,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
        )
