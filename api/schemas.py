# api/schemas.py

from typing import List, Optional
from pydantic import BaseModel, Field


class SpanSchema(BaseModel):
    start: int
    end: int
    type: Optional[str] = None


class EncodeRequest(BaseModel):
    tokens: Optional[List[str]] = None
    length: Optional[int] = Field(default=None, ge=0)
    spans: List[SpanSchema] = []
    scheme: str = "bio"


class EncodeResponse(BaseModel):
    tags: List[str]


class TagsRequest(BaseModel):
    tags: List[str]
    scheme: str = "bio"


class DecodeResponse(BaseModel):
    spans: List[SpanSchema]


class VocabularyResponse(BaseModel):
    scheme: str
    consistent: bool


class ValidateResponse(BaseModel):
    valid: bool
