"""
Error taxonomy shared by repositories, resolvers and the access guard.

Each error is an `HTTPException`, so services raise them directly and
FastAPI turns them into responses; nothing in between catches them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationError(HTTPException):
    def __init__(self, detail: Any = "Bad request.") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: Any = "Not found.") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: Any = "Unauthorized.") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def error_messages(details: Sequence[Mapping[str, Any]]) -> list[str]:
    """
    Flatten pydantic error details into "field: message" strings.
    """
    return [
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
        for err in details
    ]


def validate_model(model: type[ModelT], data: Any) -> ModelT:
    """
    Validate `data` against a pydantic model, reporting failures as a 400.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(error_messages(exc.errors())) from exc
