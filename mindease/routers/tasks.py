"""Task routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from mindease.core.deps import AuthUser, get_tasks_service
from mindease.schemas.board import TaskCreateSchema, TaskOutSchema, TaskUpdateSchema
from mindease.services.tasks import TasksService

router = APIRouter(prefix="/tasks", tags=["tasks"])

Service = Annotated[TasksService, Depends(get_tasks_service)]


@router.post("", response_model=TaskOutSchema, status_code=status.HTTP_201_CREATED)
def create_task(body: TaskCreateSchema, current_user: AuthUser, service: Service):
    return service.create(current_user.user_id, body.model_dump())


@router.get("", response_model=list[TaskOutSchema])
def list_tasks(current_user: AuthUser, service: Service):
    return service.get_all(current_user.user_id)


@router.get("/column/{column_id}", response_model=list[TaskOutSchema])
def list_tasks_by_column(column_id: str, current_user: AuthUser, service: Service):
    """Tasks of one column; 404 when the column isn't the caller's."""
    return service.get_all_by_column(current_user.user_id, column_id)


@router.get("/{task_id}", response_model=TaskOutSchema)
def get_task(task_id: str, current_user: AuthUser, service: Service):
    return service.get_by_id(current_user.user_id, task_id)


@router.put("/{task_id}", response_model=TaskOutSchema)
def update_task(task_id: str, body: TaskUpdateSchema, current_user: AuthUser, service: Service):
    return service.update(current_user.user_id, task_id, body.changes())


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, current_user: AuthUser, service: Service):
    service.delete(current_user.user_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
