"""
Response envelope shared by every flight endpoint.

Clients always get the same four keys back, whether the call found data,
found nothing, or failed: `success`, `message`, `errors` (row diagnostics and
run-level failures) and `data`.
"""
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    message: str | None = None
    errors: list[str] = []
    data: T | None = None
