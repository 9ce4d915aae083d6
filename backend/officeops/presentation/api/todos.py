"""
Todos API Router - FastAPI endpoints over the request router.

Guidelines:
- Thin layer: only handles HTTP concerns (request/response)
- Builds a Command/Query and sends it through RequestRouter (Dishka)
- Body is always the Result envelope: {"success", "value", "error"}

Status mapping:
  success → 200 (201 for create)
  NOT_FOUND → 404, VALIDATION → 400, anything else → 500

Flow:
  HTTP Request → Router → Command → RequestRouter → Handler → UnitOfWork
                                 ↓
  HTTP Response ← envelope ← Result ←
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from officeops.application.commands.todos import (
    CompleteTodoCommand,
    CreateTodoCommand,
    DeleteTodoCommand,
    ReopenTodoCommand,
    UpdateTodoCommand,
)
from officeops.application.common.request_router import RequestRouter
from officeops.application.queries.todos import (
    GetAllTodosQuery,
    GetCompletedTodosQuery,
    GetPagedTodosQuery,
    GetPendingTodosQuery,
    GetTodoByIdQuery,
    GetTodoStatsQuery,
)
from officeops.config.settings import Config
from officeops.domain.common.result import ErrorType, Result
from officeops.presentation.dependencies.current_user import get_current_user_id

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class CreateTodoRequest(BaseModel):
    title: str
    description: Optional[str] = None


class UpdateTodoRequest(BaseModel):
    title: str
    description: Optional[str] = None
    is_completed: Optional[bool] = None


# ==================== RESULT MAPPING ====================

_FAILURE_STATUS = {
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
}


def to_response(result: Result, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    if result.is_success:
        status_code = success_status
    else:
        status_code = _FAILURE_STATUS.get(
            result.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        logger.info("Request failed (%s): %s", result.error_type, result.error)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result.to_dict()))


# ==================== ROUTER ====================

router = APIRouter(prefix="/todos", tags=["todos"])


# ==================== QUERIES ====================


@router.get("")
@inject
async def list_todos(
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    return to_response(await request_router.send(GetAllTodosQuery(user_id=user_id)))


@router.get("/paged")
@inject
async def list_paged_todos(
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
    page: int = 1,
    page_size: int = Config.DEFAULT_PAGE_SIZE,
):
    query = GetPagedTodosQuery(user_id=user_id, page=page, page_size=page_size)
    return to_response(await request_router.send(query))


@router.get("/completed")
@inject
async def list_completed_todos(
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    return to_response(await request_router.send(GetCompletedTodosQuery(user_id=user_id)))


@router.get("/pending")
@inject
async def list_pending_todos(
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    return to_response(await request_router.send(GetPendingTodosQuery(user_id=user_id)))


@router.get("/stats")
@inject
async def get_todo_stats(
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    return to_response(await request_router.send(GetTodoStatsQuery(user_id=user_id)))


@router.get("/{todo_id}")
@inject
async def get_todo(
    todo_id: int,
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    query = GetTodoByIdQuery(todo_id=todo_id, user_id=user_id)
    return to_response(await request_router.send(query))


# ==================== COMMANDS ====================


@router.post("")
@inject
async def create_todo(
    request: CreateTodoRequest,
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    command = CreateTodoCommand(
        user_id=user_id, title=request.title, description=request.description
    )
    return to_response(
        await request_router.send(command), success_status=status.HTTP_201_CREATED
    )


@router.put("/{todo_id}")
@inject
async def update_todo(
    todo_id: int,
    request: UpdateTodoRequest,
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    command = UpdateTodoCommand(
        todo_id=todo_id,
        user_id=user_id,
        title=request.title,
        description=request.description,
        is_completed=request.is_completed,
    )
    return to_response(await request_router.send(command))


@router.post("/{todo_id}/complete")
@inject
async def complete_todo(
    todo_id: int,
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    command = CompleteTodoCommand(todo_id=todo_id, user_id=user_id)
    return to_response(await request_router.send(command))


@router.post("/{todo_id}/reopen")
@inject
async def reopen_todo(
    todo_id: int,
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    command = ReopenTodoCommand(todo_id=todo_id, user_id=user_id)
    return to_response(await request_router.send(command))


@router.delete("/{todo_id}")
@inject
async def delete_todo(
    todo_id: int,
    request_router: FromDishka[RequestRouter],
    user_id: str = Depends(get_current_user_id),
):
    command = DeleteTodoCommand(todo_id=todo_id, user_id=user_id)
    return to_response(await request_router.send(command))
