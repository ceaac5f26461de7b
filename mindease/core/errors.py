"""Domain errors. Every one of them renders as {"error": message}."""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class ConflictError(AppError):
    # duplicate user, active session exists, already-finished session
    status_code = 400


class UnauthorizedError(AppError):
    status_code = 401


class NotFoundError(AppError):
    """Missing, or owned by someone else; the two are never told apart."""

    status_code = 404
