import os

from pydantic import BaseModel, Field

from .core import USER_AGENT


class Settings(BaseModel):
    """Connection settings, read from DBAAS_* environment variables."""

    token: str | None = Field(None, description="Keystone token sent as X-Auth-Token")
    endpoint: str | None = Field(None, description="e.g., https://ru-1.dbaas.example.com/v1")
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            token=os.getenv("DBAAS_TOKEN") or None,
            endpoint=os.getenv("DBAAS_ENDPOINT") or None,
            user_agent=os.getenv("DBAAS_USER_AGENT") or USER_AGENT,
        )
