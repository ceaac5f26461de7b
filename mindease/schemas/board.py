"""Pydantic schemas for boards, columns and tasks."""
from datetime import datetime
from typing import Annotated, ClassVar

from pydantic import Field, StringConstraints

from mindease.models.enums import TaskStatus
from mindease.schemas.base import CamelSchema, PartialUpdateSchema

HexColor = Annotated[str, StringConstraints(pattern=r"^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")]
BoardName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
TaskTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]


# ---------- boards ----------

class BoardCreateSchema(CamelSchema):
    name: BoardName
    description: str | None = Field(None, max_length=1000)
    color: HexColor | None = None


class BoardUpdateSchema(PartialUpdateSchema):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    name: BoardName = None
    description: str | None = Field(None, max_length=1000)
    color: HexColor = None


class BoardOutSchema(CamelSchema):
    id: str
    user_id: str
    name: str
    description: str | None = None
    color: str
    created_at: datetime
    updated_at: datetime
    tasks_count: int
    total_hours: float


class BoardRefSchema(CamelSchema):
    id: str
    name: str
    color: str


# ---------- columns ----------

class ColumnCreateSchema(CamelSchema):
    board_id: str
    name: BoardName


class ColumnUpdateSchema(PartialUpdateSchema):
    board_id: str = None
    name: BoardName = None


class ColumnOutSchema(CamelSchema):
    id: str
    user_id: str
    board_id: str
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    tasks_count: int
    board: BoardRefSchema


class ColumnRefSchema(CamelSchema):
    id: str
    name: str
    slug: str
    board: BoardRefSchema


# ---------- tasks ----------

class TaskCreateSchema(CamelSchema):
    column_id: str
    title: TaskTitle
    description: str | None = Field(None, max_length=2000)
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    hours: float = Field(0, ge=0)


class TaskUpdateSchema(PartialUpdateSchema):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description", "due_date"})

    column_id: str = None
    title: TaskTitle = None
    description: str | None = Field(None, max_length=2000)
    status: TaskStatus = None
    due_date: datetime | None = None
    hours: float = Field(None, ge=0)


class TaskOutSchema(CamelSchema):
    id: str
    user_id: str
    column_id: str
    title: str
    description: str | None = None
    status: TaskStatus
    due_date: datetime | None = None
    hours: float
    created_at: datetime
    updated_at: datetime
    column: ColumnRefSchema
