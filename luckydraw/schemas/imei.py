from typing import Any, Optional

from pydantic import BaseModel, field_validator

DEFAULT_UPLOAD_MESSAGE = "IMEI numbers uploaded successfully!"


class ImeiUploadResult(BaseModel):
    success: bool
    message: str = DEFAULT_UPLOAD_MESSAGE
    uploaded: Optional[int] = None

    @field_validator("message", mode="before")
    @classmethod
    def default_message(cls, value: Any) -> Any:
        return value or DEFAULT_UPLOAD_MESSAGE
