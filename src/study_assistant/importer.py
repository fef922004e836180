"""Lecture-note file loading."""
import mimetypes
from pathlib import Path

from study_assistant.models import RawDocument

ACCEPTED_MIME_TYPES = ("text/plain",)


class UnsupportedFileType(ValueError):
    def __init__(self, file_name: str, mime_type: str | None):
        super().__init__(f"{file_name}: unsupported file type {mime_type or 'unknown'}")
        self.file_name = file_name
        self.mime_type = mime_type


def detect_mime_type(file_path: str) -> str | None:
    mime_type, _ = mimetypes.guess_type(Path(file_path).name)
    return mime_type


def is_accepted(file_path: str) -> bool:
    return detect_mime_type(file_path) in ACCEPTED_MIME_TYPES


def read_document(file_path: str) -> RawDocument:
    """Read a plain-text lecture file fully into memory."""
    path = Path(file_path)
    mime_type = detect_mime_type(file_path)
    if mime_type not in ACCEPTED_MIME_TYPES:
        raise UnsupportedFileType(path.name, mime_type)
    text = path.read_text(encoding="utf-8", errors="replace")
    return RawDocument(name=path.name, text=text, mime_type=mime_type)
