import json
from dataclasses import dataclass, field
from typing import Any, Optional

from httpx import Headers


@dataclass(frozen=True)
class Response:
    """Raw payload received from the transport."""

    status_code: Optional[int] = None
    headers: Headers = field(default_factory=Headers)
    data: Optional[bytes] = None

    @property
    def is_successful(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return (self.data or b"").decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ValueError: If the body is empty or not valid JSON.
        """
        if not self.data:
            raise ValueError("Response has no body")
        return json.loads(self.data)
