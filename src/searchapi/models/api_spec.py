from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class UrlSpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    paths: Tuple[str, ...] = Field(min_length=1)


class BodySpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    required: bool = False


class ApiSpec(BaseModel):
    """Declarative description of a single REST API operation.

    Mirrors one entry of a versioned catalog file::

        {
            "methods": ["GET", "POST"],
            "url": {"paths": ["/_search", "/{index}/_search"]},
            "body": {"required": false}
        }

    Additional keys (documentation links, accepted query params) are kept as
    extra fields and ignored by the dispatcher.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    methods: Tuple[str, ...] = Field(min_length=1)
    url: UrlSpec
    body: Optional[BodySpec] = None

    @property
    def body_required(self) -> bool:
        return self.body is not None and self.body.required
