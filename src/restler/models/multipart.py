from pydantic import BaseModel, ConfigDict

from .._utils.constants import CONTENT_TYPE_OCTET_STREAM


class MultipartFile(BaseModel):
    """A file part of a multipart/form-data payload."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes
    content_type: str = CONTENT_TYPE_OCTET_STREAM
