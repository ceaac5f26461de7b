"""Tasks, scoped to their owner; every task hangs off a column the owner also owns."""
import logging

from sqlalchemy.orm import Session

from mindease.core.errors import NotFoundError
from mindease.models.column import BoardColumn
from mindease.models.enums import TaskStatus
from mindease.models.task import Task
from mindease.services.columns import COLUMN_NOT_FOUND

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"

UPDATABLE_FIELDS = ("column_id", "title", "description", "status", "due_date", "hours")


class TasksService:
    def __init__(self, db: Session):
        self.db = db

    def _find_column(self, user_id: str, column_id: str) -> BoardColumn:
        column = (
            self.db.query(BoardColumn)
            .filter(BoardColumn.id == column_id, BoardColumn.user_id == user_id)
            .first()
        )
        if column is None:
            raise NotFoundError(COLUMN_NOT_FOUND)
        return column

    def create(self, user_id: str, data: dict) -> Task:
        self._find_column(user_id, data["column_id"])
        task = Task(
            user_id=user_id,
            column_id=data["column_id"],
            title=data["title"],
            description=data.get("description"),
            status=data.get("status") or TaskStatus.TODO.value,
            due_date=data.get("due_date"),
            hours=data.get("hours") or 0,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def get_all(self, user_id: str) -> list[Task]:
        return self.db.query(Task).filter(Task.user_id == user_id).order_by(Task.created_at.desc()).all()

    def get_all_by_column(self, user_id: str, column_id: str) -> list[Task]:
        self._find_column(user_id, column_id)
        return (
            self.db.query(Task)
            .filter(Task.user_id == user_id, Task.column_id == column_id)
            .order_by(Task.created_at.desc())
            .all()
        )

    def get_by_id(self, user_id: str, task_id: str) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    def update(self, user_id: str, task_id: str, changes: dict) -> Task:
        task = self.get_by_id(user_id, task_id)
        if "column_id" in changes:
            self._find_column(user_id, changes["column_id"])

        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(task, field, changes[field])
        self.db.commit()
        self.db.refresh(task)
        return task

    def delete(self, user_id: str, task_id: str) -> None:
        task = self.get_by_id(user_id, task_id)
        self.db.delete(task)
        self.db.commit()
        logger.info("user %s deleted task %s", user_id, task_id)
