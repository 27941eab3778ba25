"""도메인 오류 → HTTP 상태 코드.

Errors raised by services. They subclass ``HTTPException`` so FastAPI renders
them as ``{"detail": ...}`` with the matching status and routers need no
translation layer.
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 — 장소, 습관, 번역, 댓글 등이 없을 때."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 — 유니크 이름 충돌 (e.g. explicit category creation with a taken name)."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 — 스키마 검증은 통과했지만 도메인 규칙 위반.

    The payload is well formed but breaks a domain rule, such as replying to a
    reply or listing the same language twice.
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidStatusTransitionError(BadRequestError):
    """현재 상태와 같은 상태로의 변경 요청."""

    def __init__(self, detail: str = "Status is not different") -> None:
        super().__init__(detail=detail)
