"""Remote document store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator


class GistDescriptor(BaseModel):
    id: str
    description: str = ""
    updated_at: datetime | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        return "" if value is None else value


class RemoteStore(ABC):
    """A single JSON document addressed by an opaque id.

    Failures surface as ``None`` / ``False``; implementations never retry.
    """

    @abstractmethod
    async def create_document(self, content: str, description: str) -> str | None: ...  # pragma: no cover

    @abstractmethod
    async def get_document(self, document_id: str) -> dict[str, Any] | None: ...  # pragma: no cover

    @abstractmethod
    async def update_document(self, document_id: str, content: str, description: str) -> bool: ...  # pragma: no cover

    @abstractmethod
    async def list_candidate_documents(self) -> list[GistDescriptor] | None: ...  # pragma: no cover
