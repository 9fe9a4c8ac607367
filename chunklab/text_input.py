"""Utilities for turning uploaded files into text without storing them."""

from typing import Any, Dict

from fastapi import UploadFile


def extract_text_from_bytes(data: bytes) -> str:
    """Best-effort text extraction from uploaded content."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("utf-8", errors="ignore")


def describe_upload(file: UploadFile, size_bytes: int) -> Dict[str, Any]:
    """Return a user-facing description of an upload including its size."""
    return {
        "filename": file.filename or "upload",
        "content_type": file.content_type or "application/octet-stream",
        "size_bytes": size_bytes,
    }
