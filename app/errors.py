from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse


class PostsError(Exception):
    """Base for errors a handler reports to the caller as-is."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_body())


class NotFoundError(PostsError):
    status_code = 404


class PayloadValidationError(PostsError):
    def __init__(self, details: List[Dict[str, str]], message: str = "Validation failed"):
        super().__init__(message)
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


class BusinessRuleViolation(PostsError):
    def __init__(self, message: str, blockers: Optional[List[str]] = None):
        super().__init__(message)
        self.blockers = blockers

    def to_body(self) -> Dict[str, Any]:
        body = super().to_body()
        if self.blockers is not None:
            body["blockers"] = self.blockers
        return body


def internal_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})
