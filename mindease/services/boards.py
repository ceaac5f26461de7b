"""Boards, scoped to their owner. Task count and total hours are derived on read."""
import logging

from sqlalchemy.orm import Session, selectinload

from mindease.core.config import get_settings
from mindease.core.errors import NotFoundError
from mindease.models.board import Board
from mindease.models.column import BoardColumn

logger = logging.getLogger(__name__)

BOARD_NOT_FOUND = "Board not found"


class BoardsService:
    def __init__(self, db: Session):
        self.db = db

    def _query(self, user_id: str):
        return (
            self.db.query(Board)
            .options(selectinload(Board.columns).selectinload(BoardColumn.tasks))
            .filter(Board.user_id == user_id)
        )

    def create(self, user_id: str, name: str, description: str | None = None, color: str | None = None) -> Board:
        board = Board(
            user_id=user_id,
            name=name,
            description=description,
            color=color or get_settings().default_board_color,
        )
        self.db.add(board)
        self.db.commit()
        self.db.refresh(board)
        return board

    def get_all(self, user_id: str) -> list[Board]:
        return self._query(user_id).order_by(Board.created_at.desc()).all()

    def get_by_id(self, user_id: str, board_id: str) -> Board:
        board = self._query(user_id).filter(Board.id == board_id).first()
        if board is None:
            raise NotFoundError(BOARD_NOT_FOUND)
        return board

    def update(self, user_id: str, board_id: str, changes: dict) -> Board:
        board = self.get_by_id(user_id, board_id)
        for field in ("name", "description", "color"):
            if field in changes:
                setattr(board, field, changes[field])
        self.db.commit()
        self.db.refresh(board)
        return board

    def delete(self, user_id: str, board_id: str) -> None:
        board = self.db.query(Board).filter(Board.id == board_id, Board.user_id == user_id).first()
        if board is None:
            raise NotFoundError(BOARD_NOT_FOUND)
        self.db.delete(board)
        self.db.commit()
        logger.info("user %s deleted board %s", user_id, board_id)
