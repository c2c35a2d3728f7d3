from fastapi import HTTPException
from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class RoundNotFound(DomainException):
    def __init__(self, round_id: str) -> None:
        super().__init__(
            status_code=404,
            title="Round not found",
            detail=f"round '{round_id}' not found",
            code="round_not_found",
        )


class TripNotFound(DomainException):
    def __init__(self, trip_id: str) -> None:
        super().__init__(
            status_code=404,
            title="Trip not found",
            detail=f"trip '{trip_id}' not found",
            code="trip_not_found",
        )


class MatchNotFound(DomainException):
    def __init__(self, round_id: str) -> None:
        super().__init__(
            status_code=404,
            title="Match not found",
            detail=f"round '{round_id}' has no match",
            code="match_not_found",
        )


class BetNotFound(DomainException):
    def __init__(self, round_id: str, format_: str) -> None:
        super().__init__(
            status_code=404,
            title="Bet not found",
            detail=f"round '{round_id}' has no {format_} bet",
            code="bet_not_found",
        )


def http_problem(
    status_code: int,
    detail: str,
    code: str,
    *,
    headers: Optional[dict[str, str]] = None,
) -> HTTPException:
    """Create an HTTPException with an attached problem code."""

    exc = HTTPException(status_code=status_code, detail=detail, headers=headers)
    setattr(exc, "code", code)
    return exc
