from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify(value: Any) -> Any:
    # Models sometimes emit numbers for percentage and score fields.
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class SearchResult(BaseModel):
    """Normalized search result used as evidence for the completion request."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    link: str = ""
    summary: str = ""

    @field_validator("title", "link", "summary", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _stringify(value)


class SocialReaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    comment: str = ""
    source_url: str = Field(default="", alias="sourceUrl")

    @field_validator("comment", "source_url", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _stringify(value)


class IncidentRecord(BaseModel):
    """One controversy event as summarized by the completion service."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    onset: str = ""
    resolution: str = ""
    description: str = ""
    negative_rate: str = Field(default="", alias="negativeRate")
    positive_rate: str = Field(default="", alias="positiveRate")
    category: str = ""
    risk_score: str = Field(default="", alias="riskScore")
    impact: str = ""
    related_news: list[SearchResult] = Field(default_factory=list, alias="relatedNews")
    social_reactions: list[SocialReaction] = Field(default_factory=list, alias="socialReactions")

    @field_validator(
        "onset",
        "resolution",
        "description",
        "negative_rate",
        "positive_rate",
        "category",
        "risk_score",
        "impact",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _stringify(value)

    @field_validator("related_news", "social_reactions", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ScandalReport(BaseModel):
    model_config = ConfigDict(extra="allow")

    incidents: list[IncidentRecord]

    @property
    def max_risk_score(self) -> int | None:
        """Highest parseable risk score across incidents."""
        scores: list[int] = []
        for incident in self.incidents:
            digits = "".join(ch for ch in incident.risk_score if ch.isdigit() or ch == ".")
            try:
                scores.append(int(float(digits)))
            except ValueError:
                continue
        return max(scores) if scores else None
