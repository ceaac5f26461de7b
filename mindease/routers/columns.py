"""Column routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from mindease.core.deps import AuthUser, get_columns_service
from mindease.schemas.board import ColumnCreateSchema, ColumnOutSchema, ColumnUpdateSchema
from mindease.services.columns import ColumnsService

router = APIRouter(prefix="/columns", tags=["columns"])

Service = Annotated[ColumnsService, Depends(get_columns_service)]


@router.post("", response_model=ColumnOutSchema, status_code=status.HTTP_201_CREATED)
def create_column(body: ColumnCreateSchema, current_user: AuthUser, service: Service):
    """Create a column on one of the caller's boards; the slug is derived from the name."""
    return service.create(current_user.user_id, body.board_id, body.name)


@router.get("", response_model=list[ColumnOutSchema])
def list_columns(current_user: AuthUser, service: Service):
    return service.get_all(current_user.user_id)


# registered before /{column_id} so "slug" is never taken for an id
@router.get("/slug/{slug}", response_model=ColumnOutSchema)
def get_column_by_slug(slug: str, current_user: AuthUser, service: Service):
    return service.get_by_slug(current_user.user_id, slug)


@router.get("/{column_id}", response_model=ColumnOutSchema)
def get_column(column_id: str, current_user: AuthUser, service: Service):
    return service.get_by_id(current_user.user_id, column_id)


@router.put("/{column_id}", response_model=ColumnOutSchema)
def update_column(column_id: str, body: ColumnUpdateSchema, current_user: AuthUser, service: Service):
    return service.update(current_user.user_id, column_id, body.changes())


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(column_id: str, current_user: AuthUser, service: Service):
    service.delete(current_user.user_id, column_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
