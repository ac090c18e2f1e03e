from typing import Any, Optional, Union

import httpx

from .._utils.constants import CONTENT_TYPE_OCTET_STREAM
from ..models.errors import EncodingError
from ..models.multipart import MultipartFile
from ._fields import is_sequence, iter_fields, render_scalar

FilePart = Union[
    tuple[Optional[str], bytes],
    tuple[Optional[str], bytes, Optional[str]],
]

# only used to drive httpx's body encoder, never sent
_ENCODING_URL = "http://localhost/"


class MultipartEncoder:
    """Encodes an object as a multipart/form-data body (RFC 7578).

    Each field becomes one part, in declaration order. ``MultipartFile``
    values become file parts, ``bytes`` become octet-stream parts and
    sequences become repeated parts with the same name. The body itself is
    written by httpx.
    """

    def encode(self, obj: Any, boundary: str) -> bytes:
        if not boundary:
            raise EncodingError("Multipart boundary must not be empty")

        parts = self.parts(obj)
        if not parts:
            return f"--{boundary}--\r\n".encode("ascii")

        try:
            request = httpx.Request(
                "POST",
                _ENCODING_URL,
                files=parts,
                headers={"Content-Type": f"multipart/form-data; boundary={boundary}"},
            )
            return request.read()
        except (TypeError, ValueError, UnicodeError) as e:
            raise EncodingError(f"Cannot encode multipart body: {e}") from e

    def parts(self, obj: Any) -> list[tuple[str, FilePart]]:
        """``files=`` entries for httpx, one per part, in field order."""
        parts: list[tuple[str, FilePart]] = []
        for name, value in iter_fields(obj):
            values = value if is_sequence(value) else [value]
            for element in values:
                if element is None:
                    continue
                parts.append((name, self._part(name, element)))
        return parts

    def _part(self, name: str, value: Any) -> FilePart:
        if isinstance(value, MultipartFile):
            return (value.filename, value.content, value.content_type)
        if isinstance(value, (bytes, bytearray)):
            return (None, bytes(value), CONTENT_TYPE_OCTET_STREAM)
        return (None, render_scalar(name, value).encode("utf-8"))
