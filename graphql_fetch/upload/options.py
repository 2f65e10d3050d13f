"""
Multipart option construction for operations carrying files.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Any, Dict, List, Optional

import aiohttp

from ..client import GraphQLFetch
from ..config.models import FetchConfig
from ..options import RequestPayload, construct_default_options, serialize_request
from .files import ExtractedFile, UploadFile, clone_tree, extract_files

logger = logging.getLogger(__name__)


def _extract_request_files(request: RequestPayload) -> List[ExtractedFile]:
    if isinstance(request, list):
        files: List[ExtractedFile] = []
        for index, operation in enumerate(request):
            files.extend(extract_files(operation.get("variables"), f"{index}.variables"))
        return files
    return extract_files(request.get("variables"), "variables")


def _add_file(form: aiohttp.FormData, extracted: ExtractedFile) -> None:
    value = extracted.file

    if isinstance(value, UploadFile):
        form.add_field(
            extracted.path,
            value.stream(),
            filename=value.name,
            content_type=value.mime_type,
        )
    elif isinstance(value, io.IOBase):
        name = getattr(value, "name", None)
        form.add_field(
            extracted.path,
            value,
            filename=os.path.basename(name) if isinstance(name, str) else "blob",
            content_type="application/octet-stream",
        )
    else:
        form.add_field(
            extracted.path,
            bytes(value),
            filename="blob",
            content_type="application/octet-stream",
        )


def construct_upload_options(
    request: RequestPayload, options: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Build multipart options when the request carries files.

    The form holds an ``operations`` field with the JSON request (files
    replaced by ``null``) followed by one field per file, named after the
    file's path. Requests without files get the default JSON options.

    Args:
        request: Operation dict or list of operation dicts
        options: Options collected by middleware

    Returns:
        Transport options

    Raises:
        SerializationError: If the request cannot be encoded
    """
    payload = clone_tree(request)
    files = _extract_request_files(payload)

    if not files:
        return construct_default_options(request, options)

    form = aiohttp.FormData()
    form.add_field("operations", serialize_request(payload))
    for extracted in files:
        _add_file(form, extracted)

    # aiohttp sets the multipart Content-Type with its boundary
    headers = {
        key: value
        for key, value in (options.get("headers") or {}).items()
        if key.lower() != "content-type"
    }

    logger.debug("Sending %d file(s) as multipart form", len(files))
    return {**options, "method": "POST", "body": form, "headers": headers}


def create_graphql_fetch_upload(
    config: Optional[FetchConfig] = None, **overrides: Any
) -> GraphQLFetch:
    """Create a client whose requests switch to multipart when files are present."""
    overrides.setdefault("construct_options", construct_upload_options)
    return GraphQLFetch(config, **overrides)
