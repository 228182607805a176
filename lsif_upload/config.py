import os

from pydantic import BaseModel, field_validator

DEFAULT_ENDPOINT = "https://sourcegraph.com"


class Config(BaseModel):
    endpoint: str = DEFAULT_ENDPOINT
    access_token: str = ""

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, endpoint: str | None = None, access_token: str | None = None) -> "Config":
        """Build a Config from SRC_ENDPOINT / SRC_ACCESS_TOKEN, letting explicit values win."""
        return cls(
            endpoint=endpoint or os.environ.get("SRC_ENDPOINT") or DEFAULT_ENDPOINT,
            access_token=access_token if access_token is not None else os.environ.get("SRC_ACCESS_TOKEN", ""),
        )
