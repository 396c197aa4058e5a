"""Search configuration models."""

from collections.abc import Sequence
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..config import get_settings
from ..core.exceptions import InvalidConfigError

MODES = ("strict", "loose", "fuzzy")


class DataSource(BaseModel):
    """Where records come from and which of their fields are searched."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    store: Any = Field(..., description="Sequence of records, kept by reference")
    key: Optional[List[str]] = Field(None, description="Fields to search, None for whole record")
    filter: Optional[Callable[..., Any]] = Field(
        None, description="Post-scan filter over the entry list"
    )

    @field_validator('store')
    def validate_store(cls, v: Any) -> Any:
        """Require a non-string sequence without copying it."""
        if v is None:
            raise ValueError("data.store is required")
        if isinstance(v, (str, bytes)) or not isinstance(v, Sequence):
            raise ValueError(f"data.store must be a sequence, got {type(v).__name__}")
        return v

    @field_validator('key', mode='before')
    def validate_key(cls, v: Any) -> Any:
        """Accept a single field name as shorthand for a one-item list."""
        if isinstance(v, str):
            return [v]
        return v


class TriggerConfig(BaseModel):
    """Decides whether a normalized query should run a search."""

    condition: Optional[Callable[[str], Any]] = Field(None, description="Custom trigger predicate")


class QueryConfig(BaseModel):
    """Query preparation options."""

    manipulate: Optional[Callable[[str], str]] = Field(
        None, description="Replaces default normalization"
    )


class SearchConfig(BaseModel):
    """Full configuration of one search setup."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    data: DataSource
    search_engine: Optional[Callable[..., Any]] = Field(
        None, alias="searchEngine", description="Custom matcher (query, text) -> match"
    )
    mode: str = Field(default_factory=lambda: get_settings().default_mode)
    sort: Optional[Callable[[Any, Any], Any]] = Field(None, description="Entry comparator")
    threshold: int = Field(default_factory=lambda: get_settings().default_threshold, ge=0)
    trigger: TriggerConfig = Field(default_factory=TriggerConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    diacritics: bool = Field(default_factory=lambda: get_settings().diacritics)
    fuzzy_threshold: float = Field(
        default_factory=lambda: get_settings().fuzzy_threshold, ge=0.0, le=1.0
    )

    @model_validator(mode='before')
    @classmethod
    def split_engine_mode(cls, data: Any) -> Any:
        """A string search engine names a default matcher mode."""
        if isinstance(data, Mapping):
            for name in ("search_engine", "searchEngine"):
                engine = data.get(name)
                if isinstance(engine, str):
                    data = {k: v for k, v in data.items() if k != name}
                    data["mode"] = engine
        return data

    @field_validator('mode')
    def validate_mode(cls, v: str) -> str:
        """Validate matcher mode."""
        mode = v.lower()
        if mode not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")
        return mode

    @classmethod
    def from_options(cls, options: Union["SearchConfig", Mapping[str, Any]]) -> "SearchConfig":
        """
        Build a configuration from a plain mapping of options.

        Args:
            options: Mapping shaped like the configuration, or a config

        Returns:
            Validated SearchConfig

        Raises:
            InvalidConfigError: If required options are missing or invalid
        """
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise InvalidConfigError(
                f"configuration must be a mapping, got {type(options).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidConfigError(
                "invalid search configuration",
                details={"errors": _describe_errors(e)}
            ) from e


def _describe_errors(error: ValidationError) -> List[Dict[str, str]]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]
