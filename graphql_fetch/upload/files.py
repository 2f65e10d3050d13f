"""
File values embedded in GraphQL variables.

``extract_files`` finds upload values inside a variables tree, replaces them
with ``None`` (the JSON placeholder the server fills in) and reports where
each one was found.
"""

from __future__ import annotations

import io
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncGenerator, List, Optional, Union

import aiofiles
from pydantic import BaseModel, Field, model_validator

DEFAULT_CHUNK_SIZE = 64 * 1024


class UploadFile(BaseModel):
    """File to upload, given either as bytes or as a local path."""

    content: Optional[bytes] = Field(default=None, description="File content")
    path: Optional[Path] = Field(default=None, description="Local file path")
    filename: Optional[str] = Field(default=None, description="Filename sent to the server")
    content_type: Optional[str] = Field(default=None, description="Content type")
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0, description="Read chunk size")

    @model_validator(mode="after")
    def check_source(self) -> "UploadFile":
        """Exactly one of content and path must be set."""
        if (self.content is None) == (self.path is None):
            raise ValueError("UploadFile needs exactly one of content or path")
        return self

    @property
    def name(self) -> str:
        """Filename reported in the multipart part."""
        if self.filename:
            return self.filename
        if self.path is not None:
            return self.path.name
        return "blob"

    @property
    def mime_type(self) -> str:
        """Content type, guessed from the filename when not given."""
        return (
            self.content_type
            or mimetypes.guess_type(self.name)[0]
            or "application/octet-stream"
        )

    async def stream(self) -> AsyncGenerator[bytes, None]:
        """Yield the file content in chunks."""
        if self.content is not None:
            yield self.content
            return

        async with aiofiles.open(self.path, "rb") as f:  # type: ignore[arg-type]
            while True:
                chunk = await f.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk


FileValue = Union[UploadFile, io.IOBase, bytes, bytearray]


@dataclass
class ExtractedFile:
    """A file found in a variables tree and the dotted path it was found at."""

    path: str
    file: FileValue


def is_file(value: Any) -> bool:
    """Check whether ``value`` should be sent as a multipart file part."""
    return isinstance(value, (UploadFile, io.IOBase, bytes, bytearray))


def extract_files(tree: Any, path: str = "") -> List[ExtractedFile]:
    """
    Collect file values from ``tree`` and replace them with ``None``.

    Dicts and lists are walked recursively and modified in place. Paths are
    dotted, with list indexes as segments: ``variables.files.0``.

    Args:
        tree: Variables tree (usually an operation's ``variables``)
        path: Path prefix for reported locations

    Returns:
        Files in the order they were found
    """
    files: List[ExtractedFile] = []

    if isinstance(tree, dict):
        items = list(tree.items())
    elif isinstance(tree, list):
        items = list(enumerate(tree))
    else:
        return files

    for key, value in items:
        child_path = f"{path}.{key}" if path else str(key)
        if is_file(value):
            files.append(ExtractedFile(path=child_path, file=value))
            tree[key] = None
        else:
            files.extend(extract_files(value, child_path))

    return files


def clone_tree(tree: Any) -> Any:
    """Copy dicts and lists, sharing every other value."""
    if isinstance(tree, dict):
        return {key: clone_tree(value) for key, value in tree.items()}
    if isinstance(tree, (list, tuple)):
        return [clone_tree(value) for value in tree]
    return tree
