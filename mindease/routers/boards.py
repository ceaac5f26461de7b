"""Board routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from mindease.core.deps import AuthUser, get_boards_service
from mindease.schemas.board import BoardCreateSchema, BoardOutSchema, BoardUpdateSchema
from mindease.services.boards import BoardsService

router = APIRouter(prefix="/boards", tags=["boards"])

Service = Annotated[BoardsService, Depends(get_boards_service)]


@router.post("", response_model=BoardOutSchema, status_code=status.HTTP_201_CREATED)
def create_board(body: BoardCreateSchema, current_user: AuthUser, service: Service):
    return service.create(current_user.user_id, body.name, body.description, body.color)


@router.get("", response_model=list[BoardOutSchema])
def list_boards(current_user: AuthUser, service: Service):
    """Caller's boards, newest first, with tasksCount and totalHours."""
    return service.get_all(current_user.user_id)


@router.get("/{board_id}", response_model=BoardOutSchema)
def get_board(board_id: str, current_user: AuthUser, service: Service):
    return service.get_by_id(current_user.user_id, board_id)


@router.put("/{board_id}", response_model=BoardOutSchema)
def update_board(board_id: str, body: BoardUpdateSchema, current_user: AuthUser, service: Service):
    return service.update(current_user.user_id, board_id, body.changes())


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_board(board_id: str, current_user: AuthUser, service: Service):
    """Delete a board together with its columns and tasks."""
    service.delete(current_user.user_id, board_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
