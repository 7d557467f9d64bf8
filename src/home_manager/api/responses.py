"""Response classes shared by the API."""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSON response declaring its charset in the content type."""
    media_type = "application/json; charset=utf-8"
