from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ._body import RequestBody
from .constants import HEADER_CONTENT_TYPE


@dataclass(frozen=True)
class RequestSpec:
    """Encapsulates the one HTTP request a dispatch produces.

    Built from an ApiSpec and the call parameters once the path, method and
    body are resolved; handed to the transport as is.
    """

    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    body: Optional[RequestBody] = None
    timeout: Union[int, float, None] = None

    @property
    def content(self) -> Union[str, bytes, None]:
        return self.body.content if self.body is not None else None

    @property
    def headers(self) -> dict[str, str]:
        if self.body is None:
            return {}
        return {HEADER_CONTENT_TYPE: self.body.content_type}
