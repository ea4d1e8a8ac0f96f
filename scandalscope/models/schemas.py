from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scandalscope.models.report import ScandalReport


# --- Requests ---


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    influencer_name: str | None = Field(default=None, alias="influencerName")


# --- Responses ---


class SearchResponse(BaseModel):
    data: ScandalReport


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
