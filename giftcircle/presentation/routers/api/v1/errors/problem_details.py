"""Problem Details bodies (RFC 7807) returned by every failing endpoint.

Beyond the five standard members, GiftCircle adds:
    errors: offending request fields, set for validation failures
    retryable: true when repeating the same request may succeed, e.g. a
        secret-friend draw that ran out of shuffle attempts
    trace_id: the request's X-Trace-Id, for matching logs
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """One rejected field of a request."""

    field: str = Field(..., description="Request field that was rejected")
    code: str = Field(..., description="Machine-readable reason")
    message: str


class ProblemDetails(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "http://localhost:8000/errors/command_validation_failed",
                    "title": "Validation Failed",
                    "status": 400,
                    "detail": "Cannot commit 13 cans. The event needs 10 and already has 0 committed. Maximum allowed: 12.",
                    "instance": "/api/v1/supplies/0192b5c4-0000-7000-8000-000000000000/contributions",
                    "errors": [
                        {
                            "field": "quantity_committed",
                            "code": "contribution_limit_exceeded",
                            "message": "Cannot commit 13 cans. The event needs 10 and already has 0 committed. Maximum allowed: 12.",
                        }
                    ],
                    "trace_id": "5f0c2a7e-8d4b-4c1e-9a57-0d3c1b9e2f10",
                }
            ]
        }
    )

    type: str = Field(..., description="URI naming the error class")
    title: str
    status: int
    detail: str
    instance: str = Field(..., description="Request path that failed")
    errors: list[ErrorDetail] | None = None
    retryable: bool | None = None
    trace_id: str | None = None
