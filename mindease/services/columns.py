"""Columns, scoped to their owner, with per-user unique slugs."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindease.core.errors import ConflictError, NotFoundError
from mindease.models.board import Board
from mindease.models.column import BoardColumn
from mindease.services.boards import BOARD_NOT_FOUND
from mindease.services.slug import slug_candidates

logger = logging.getLogger(__name__)

COLUMN_NOT_FOUND = "Column not found"

# attempts when a concurrent writer grabs the slug between probe and insert
SLUG_RETRIES = 3


class ColumnsService:
    def __init__(self, db: Session):
        self.db = db

    def _ensure_board(self, user_id: str, board_id: str) -> None:
        exists = self.db.query(Board.id).filter(Board.id == board_id, Board.user_id == user_id).first()
        if exists is None:
            raise NotFoundError(BOARD_NOT_FOUND)

    def generate_unique_slug(self, user_id: str, name: str, column_id_to_ignore: str | None = None) -> str:
        for slug in slug_candidates(name):
            query = self.db.query(BoardColumn.id).filter(
                BoardColumn.user_id == user_id, BoardColumn.slug == slug
            )
            if column_id_to_ignore:
                query = query.filter(BoardColumn.id != column_id_to_ignore)
            if query.first() is None:
                return slug

    def _commit_with_slug(self, column: BoardColumn, user_id: str, fields: dict, ignore_id: str | None) -> None:
        # a rollback expires pending changes, so they are reapplied on every attempt
        for _ in range(SLUG_RETRIES):
            for field, value in fields.items():
                setattr(column, field, value)
            column.slug = self.generate_unique_slug(user_id, fields["name"], ignore_id)
            self.db.add(column)
            try:
                self.db.commit()
                return
            except IntegrityError:
                logger.warning("slug %r taken concurrently for user %s, retrying", column.slug, user_id)
                self.db.rollback()
        raise ConflictError("Could not allocate a unique slug, try again")

    def create(self, user_id: str, board_id: str, name: str) -> BoardColumn:
        self._ensure_board(user_id, board_id)
        column = BoardColumn(user_id=user_id)
        self._commit_with_slug(column, user_id, {"board_id": board_id, "name": name}, None)
        self.db.refresh(column)
        return column

    def get_all(self, user_id: str) -> list[BoardColumn]:
        return (
            self.db.query(BoardColumn)
            .filter(BoardColumn.user_id == user_id)
            .order_by(BoardColumn.created_at.desc())
            .all()
        )

    def get_by_id(self, user_id: str, column_id: str) -> BoardColumn:
        column = (
            self.db.query(BoardColumn)
            .filter(BoardColumn.id == column_id, BoardColumn.user_id == user_id)
            .first()
        )
        if column is None:
            raise NotFoundError(COLUMN_NOT_FOUND)
        return column

    def get_by_slug(self, user_id: str, slug: str) -> BoardColumn:
        column = (
            self.db.query(BoardColumn)
            .filter(BoardColumn.slug == slug, BoardColumn.user_id == user_id)
            .first()
        )
        if column is None:
            raise NotFoundError(COLUMN_NOT_FOUND)
        return column

    def update(self, user_id: str, column_id: str, changes: dict) -> BoardColumn:
        column = self.get_by_id(user_id, column_id)

        fields = {}
        if "board_id" in changes:
            self._ensure_board(user_id, changes["board_id"])
            fields["board_id"] = changes["board_id"]

        if "name" in changes:
            fields["name"] = changes["name"]
            self._commit_with_slug(column, user_id, fields, column.id)
        else:
            for field, value in fields.items():
                setattr(column, field, value)
            self.db.commit()
        self.db.refresh(column)
        return column

    def delete(self, user_id: str, column_id: str) -> None:
        column = self.get_by_id(user_id, column_id)
        self.db.delete(column)
        self.db.commit()
        logger.info("user %s deleted column %s", user_id, column_id)
