"""Todo Schemas — Pydantic models for the Todo request body and response.

Invariants:
    - TodoPayload fields are str or null; null and omitted both become ''
    - Numbers, booleans, objects in a text field fail validation (no coercion to str)
    - Unknown keys (including id and timestamps) are ignored
    - Status is checked against TodoStatus only when validation context has strict_status=True

Design Decisions:
    - One payload for create and replace: PUT is full-replace, so the shapes match
    - Strictness via validation context: the route decides from settings, the schema stays pure
    - Empty name passes here on purpose; the store's CHECK constraint rejects it
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from todo_api.core.domain_types import TodoStatus, is_known_status


class TodoPayload(BaseModel):
    """Body of POST and PUT /api/todo — every mutable field, full replace."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Buy milk",
                "description": "Semi-skimmed, two litres",
                "status": TodoStatus.PENDING.value,
            },
        },
    )

    name: str | None = Field("", description="Short name of the task")
    description: str | None = Field("", description="Optional free text")
    status: str | None = Field(
        "", description="One of pending, in_progress, done (not enforced by default)",
    )

    @field_validator("name", "description", "status")
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    @field_validator("status")
    @classmethod
    def check_known_status(cls, v: str, info: ValidationInfo) -> str:
        strict = bool(info.context and info.context.get("strict_status"))
        if strict and not is_known_status(v):
            allowed = ", ".join(s.value for s in TodoStatus)
            raise ValueError(f"status must be one of: {allowed}")
        return v


class TodoResponse(BaseModel):
    """Todo response — public-facing Todo data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    status: str
    created_at: datetime
    updated_at: datetime
