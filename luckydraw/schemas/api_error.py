from typing import Any, Optional

from pydantic import BaseModel


class ApiError(BaseModel):
    error: Optional[str] = None
    message: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def from_body(cls, body: Any) -> "ApiError":
        if isinstance(body, dict):
            return cls.model_validate({k: str(v) for k, v in body.items() if k in ("error", "message", "detail")})

        if isinstance(body, str) and body.strip():
            return cls(detail=body.strip()[:200])

        return cls()

    def describe(self, fallback: str) -> str:
        return self.error or self.message or self.detail or fallback
