"""Result models produced by the matching pipeline."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Span = Tuple[int, int]


class MatchResult(BaseModel):
    """Match payload produced by the default matcher."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Candidate text the spans refer to")
    spans: List[Span] = Field(default_factory=list, description="Half-open matched ranges")
    score: float = Field(..., ge=0.0, le=1.0, description="Similarity score (0-1)")
    mode: str = Field(..., description="Matching mode (strict, loose, fuzzy)")

    def highlight(self, open_tag: str = "<mark>", close_tag: str = "</mark>") -> str:
        """
        Render the candidate text with every matched span wrapped in tags.

        Args:
            open_tag: Marker inserted before a span
            close_tag: Marker inserted after a span

        Returns:
            Highlighted text
        """
        parts = []
        cursor = 0
        for start, end in self.spans:
            parts.append(self.text[cursor:start])
            parts.append(f"{open_tag}{self.text[start:end]}{close_tag}")
            cursor = end
        parts.append(self.text[cursor:])
        return "".join(parts)


class MatchEntry(BaseModel):
    """One successful match of a record field against the query."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    index: int = Field(..., ge=0, description="Position of the record in the store")
    key: Optional[str] = Field(None, description="Matched field, None for whole record")
    match: Any = Field(..., description="Matcher payload")
    value: Any = Field(..., description="The original record")

    def to_dict(self, highlight: Optional[Tuple[str, str]] = None) -> Dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary.

        Args:
            highlight: Optional (open_tag, close_tag) pair; adds a
                ``highlighted`` field when the payload is a MatchResult

        Returns:
            Dictionary representation
        """
        data: Dict[str, Any] = {"index": self.index}
        if self.key is not None:
            data["key"] = self.key
        if isinstance(self.match, MatchResult):
            data["match"] = self.match.model_dump()
            if highlight is not None:
                data["highlighted"] = self.match.highlight(*highlight)
        else:
            data["match"] = self.match
        data["value"] = self.value
        return data


class SearchResponse(BaseModel):
    """Response envelope returned by the search engine."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    query: str = Field(..., description="Normalized query")
    triggered: bool = Field(..., description="Whether the trigger condition allowed a scan")
    total_results: int = Field(..., description="Total number of results")
    results: List[MatchEntry] = Field(default_factory=list, description="Ordered matches")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response timestamp"
    )
