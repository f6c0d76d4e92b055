from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class TranslitBatchArguments(BaseModel):
    texts: List[str] = Field(default_factory=list, description="Latin texts, converted in order")
    script: Optional[str] = Field(None, description="Target script, e.g. Devanagari or Tamil")

    @field_validator("texts", mode="before")
    @classmethod
    def null_texts_are_empty(cls, value):
        return [] if value is None else value


class MethodCall(BaseModel):
    method: str
    arguments: Optional[Dict[str, Any]] = None


class ChannelError(BaseModel):
    code: str
    message: str


class MethodResult(BaseModel):
    status: Literal["success", "error", "notImplemented"]
    result: Optional[List[str]] = None
    error: Optional[ChannelError] = None

    @classmethod
    def success(cls, result: List[str]) -> "MethodResult":
        return cls(status="success", result=result)

    @classmethod
    def failure(cls, code: str, message: str) -> "MethodResult":
        return cls(status="error", error=ChannelError(code=code, message=message))

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return cls(status="notImplemented")


class TranslitBatchResponse(BaseModel):
    success: bool = True
    outputs: List[str]
