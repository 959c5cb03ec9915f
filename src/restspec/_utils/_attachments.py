import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Optional, Tuple, Union

from ..models.errors import InvalidArgumentError

FileSource = Union[str, "os.PathLike[str]", "Attachment", BinaryIO]


@dataclass(frozen=True)
class Attachment:
    """A file sent as one part of a multipart request.

    Either ``path`` or ``content`` is set. Files on disk are read when the
    request is sent, uploaded file objects are read when the attachment is
    created.
    """

    filename: Optional[str]
    path: Optional[Path] = None
    content: Optional[bytes] = None
    content_type: Optional[str] = None

    @classmethod
    def from_path(
        cls, path: Union[str, "os.PathLike[str]"], content_type: Optional[str] = None
    ) -> "Attachment":
        if not path:
            raise InvalidArgumentError("File path must not be empty.")
        file_path = Path(path)
        return cls(filename=file_path.name, path=file_path, content_type=content_type)

    @classmethod
    def from_bytes(
        cls, content: bytes, filename: str, content_type: Optional[str] = None
    ) -> "Attachment":
        if content is None:
            raise InvalidArgumentError("File content must not be None.")
        return cls(filename=filename, content=bytes(content), content_type=content_type)

    @classmethod
    def from_file(
        cls,
        file: BinaryIO,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> "Attachment":
        """Read an open binary file (or an upload object exposing ``read``)."""
        if filename is None:
            filename = getattr(file, "filename", None)
        if filename is None and isinstance(getattr(file, "name", None), str):
            filename = os.path.basename(file.name)
        if content_type is None:
            content_type = getattr(file, "content_type", None)
        return cls(filename=filename, content=file.read(), content_type=content_type)

    @classmethod
    def of(cls, source: FileSource) -> "Attachment":
        if isinstance(source, Attachment):
            return source
        if isinstance(source, (str, os.PathLike)):
            return cls.from_path(source)
        if hasattr(source, "read"):
            return cls.from_file(source)
        raise InvalidArgumentError(
            f"Unsupported file source of type '{type(source).__name__}'."
        )

    @property
    def media_type(self) -> str:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.filename or "")
        return guessed or "application/octet-stream"

    def read(self) -> bytes:
        if self.content is not None:
            return self.content
        assert self.path is not None
        return self.path.read_bytes()

    def to_file_tuple(self) -> Tuple[Optional[str], bytes, str]:
        """Return the ``(filename, content, content_type)`` form httpx expects."""
        return self.filename, self.read(), self.media_type


def is_attachment(value: Any) -> bool:
    return isinstance(value, Attachment)
