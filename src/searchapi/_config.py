from typing import Optional

from pydantic import BaseModel, ConfigDict, HttpUrl, PositiveFloat, field_validator

from ._utils.constants import DEFAULT_OPEN_TIMEOUT, DEFAULT_READ_TIMEOUT, DEFAULT_URL


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_URL
    read_timeout: PositiveFloat = DEFAULT_READ_TIMEOUT
    open_timeout: PositiveFloat = DEFAULT_OPEN_TIMEOUT
    version: Optional[str] = None
    debug: bool = False

    @field_validator("url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # http(s)://host[:port][/prefix]
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid URL"
        return str(value).rstrip("/")

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value).strip()
