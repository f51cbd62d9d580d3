"""Download Redirects — shared handler for file-backed resources."""

from typing import Any

from fastapi import HTTPException, status
from fastapi.responses import RedirectResponse


def download_redirect(row: Any) -> RedirectResponse:
    """Redirect to the row's file, or 404 when none is attached."""
    if not row.file_url:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return RedirectResponse(row.file_url, status_code=status.HTTP_302_FOUND)
