"""Todo Routes — CRUD endpoints for the Todo resource under /api/todo.

Invariants:
    - GET /api/todo always 200 with a JSON array
    - GET /api/todo/{id}: malformed id or missing row → 404
    - POST /api/todo: malformed body → 500, store rejection → 400
    - PUT /api/todo/{id}: malformed id → 400, missing row → 404, malformed body → 400,
      store rejection → 400; existence is checked before the body is read
    - DELETE /api/todo/{id}: malformed id → 400, 204 when a row was deleted, else 400;
      empty body either way
    - PUT is full replace: omitted fields become ''

Design Decisions:
    - Path id taken as str and parsed here: FastAPI's int coercion would answer 422
      where these routes must answer 404 or 400
    - Body read from the Request and validated by hand: PUT must report a missing
      row before it looks at the body, and POST's malformed status differs from FastAPI's
    - POST keeps 500 for a malformed body to preserve the established client contract
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from todo_api.api.dependencies import get_app_settings, get_todo_repository
from todo_api.api.error_handlers import error_response, log_error
from todo_api.config import Settings
from todo_api.core.errors import (
    MalformedInputError, PersistenceError, ResourceNotFoundError,
)
from todo_api.core.parse_todo_id import parse_todo_id
from todo_api.core.repository_protocols import TodoRepository
from todo_api.schemas.todo import TodoPayload, TodoResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todo", tags=["todo"])

_PAYLOAD_OPENAPI: dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": TodoPayload.model_json_schema()},
        },
    },
}


async def read_todo_payload(request: Request, settings: Settings) -> TodoPayload:
    """Parse and validate the request body, raising MalformedInputError."""
    try:
        raw = await request.json()
    except ValueError as e:
        raise MalformedInputError("Review your input: body is not valid JSON") from e
    try:
        return TodoPayload.model_validate(
            raw, context={"strict_status": settings.strict_status},
        )
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) or "body"
            for err in e.errors()
        )
        raise MalformedInputError(
            f"Review your input: invalid {fields}", field=fields,
        ) from e


@router.get("", response_model=list[TodoResponse])
async def list_todos(repo: TodoRepository = Depends(get_todo_repository)):
    """List every Todo."""
    todos = await repo.list()
    return [TodoResponse.model_validate(t) for t in todos]


@router.get(
    "/{todo_id}", response_model=TodoResponse,
    responses={404: {"description": "Malformed id or Todo not found"}},
)
async def get_todo(
    todo_id: str,
    request: Request,
    repo: TodoRepository = Depends(get_todo_repository),
):
    """Get a single Todo."""
    try:
        todo = await repo.get(parse_todo_id(todo_id))
    except (MalformedInputError, ResourceNotFoundError) as e:
        return error_response(e, status.HTTP_404_NOT_FOUND, request)
    return TodoResponse.model_validate(todo)


@router.post(
    "", response_model=TodoResponse, openapi_extra=_PAYLOAD_OPENAPI,
    responses={
        400: {"description": "Failed creating item"},
        500: {"description": "Malformed request body"},
    },
)
async def create_todo(
    request: Request,
    repo: TodoRepository = Depends(get_todo_repository),
    settings: Settings = Depends(get_app_settings),
):
    """Create a Todo. The store assigns id and timestamps."""
    try:
        payload = await read_todo_payload(request, settings)
    except MalformedInputError as e:
        return error_response(e, status.HTTP_500_INTERNAL_SERVER_ERROR, request)
    try:
        todo = await repo.create(
            name=payload.name,
            description=payload.description,
            status=payload.status,
        )
    except PersistenceError as e:
        return error_response(e, status.HTTP_400_BAD_REQUEST, request)
    return TodoResponse.model_validate(todo)


@router.put(
    "/{todo_id}", response_model=TodoResponse, openapi_extra=_PAYLOAD_OPENAPI,
    responses={
        400: {"description": "Malformed id/body or error updating todo"},
        404: {"description": "Todo not found"},
    },
)
async def replace_todo(
    todo_id: str,
    request: Request,
    repo: TodoRepository = Depends(get_todo_repository),
    settings: Settings = Depends(get_app_settings),
):
    """Replace every mutable field of a Todo."""
    try:
        parsed_id = parse_todo_id(todo_id)
    except MalformedInputError as e:
        return error_response(e, status.HTTP_400_BAD_REQUEST, request)

    try:
        await repo.get(parsed_id)
    except ResourceNotFoundError as e:
        return error_response(e, status.HTTP_404_NOT_FOUND, request)

    try:
        payload = await read_todo_payload(request, settings)
    except MalformedInputError as e:
        e.context.todo_id = parsed_id
        return error_response(e, status.HTTP_400_BAD_REQUEST, request)

    try:
        todo = await repo.update(
            parsed_id,
            name=payload.name,
            description=payload.description,
            status=payload.status,
        )
    except ResourceNotFoundError as e:
        return error_response(e, status.HTTP_404_NOT_FOUND, request)
    except PersistenceError as e:
        return error_response(e, status.HTTP_400_BAD_REQUEST, request)
    return TodoResponse.model_validate(todo)


@router.delete(
    "/{todo_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"description": "Malformed id or nothing deleted"}},
)
async def delete_todo(
    todo_id: str,
    request: Request,
    repo: TodoRepository = Depends(get_todo_repository),
):
    """Soft-delete a Todo. 204 when a row was affected, 400 otherwise."""
    try:
        affected = await repo.delete(parse_todo_id(todo_id))
    except (MalformedInputError, PersistenceError) as e:
        log_error(e, request)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    if affected == 0:
        logger.info(
            f"Delete of todo {todo_id} matched no rows",
            extra={"path": request.url.path},
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
