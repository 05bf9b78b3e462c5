from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .rules import DEFAULT_MEDIA_TYPE, ELEMENT_ID, LOADING_TEXT


class Attachment(BaseModel):
    name: str
    url: str


class DataUrlParts(BaseModel):
    model_config = ConfigDict(frozen=True)

    media_type: str = Field(default=DEFAULT_MEDIA_TYPE)
    is_base64: bool = False
    raw_payload: str = ""


class InlineSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["inline"] = "inline"
    parts: DataUrlParts


class RemoteSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["remote"] = "remote"
    url: str


Source = Union[InlineSource, RemoteSource]


class ParsedTable(BaseModel):
    # Ragged rows are kept as-is; no padding or truncation.
    headers: Optional[List[str]] = None
    rows: List[List[str]] = Field(default_factory=list)


class TotalComputed(BaseModel):
    ok: Literal[True] = True
    total: float
    display: str


class PipelineFailed(BaseModel):
    ok: Literal[False] = False
    error_kind: str
    message: str


PipelineOutcome = Union[TotalComputed, PipelineFailed]


class ElementState(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SalesElementSnapshot(BaseModel):
    element_id: str = Field(default=ELEMENT_ID, examples=[ELEMENT_ID])
    text: str = Field(default=LOADING_TEXT, examples=["1234.56"])
    state: ElementState = ElementState.LOADING


class TotalSalesRequest(BaseModel):
    attachments: List[Attachment] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
