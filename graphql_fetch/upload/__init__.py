"""
File upload support for graphql_fetch.

Operations whose variables hold files are sent as multipart/form-data.
"""

from .files import ExtractedFile, UploadFile, extract_files
from .options import construct_upload_options, create_graphql_fetch_upload

__all__ = [
    "UploadFile",
    "ExtractedFile",
    "extract_files",
    "construct_upload_options",
    "create_graphql_fetch_upload",
]
