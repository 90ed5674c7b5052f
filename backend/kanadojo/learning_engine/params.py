"""Parameter validation and defaults for adaptive selection."""

import hashlib
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from kanadojo.core.app_exceptions import InvalidSelectionParamsError
from kanadojo.learning_engine.config import get_adaptive_selection_defaults

_DEFAULTS = get_adaptive_selection_defaults()


class SelectionParams(BaseModel):
    """Tunable parameters of the adaptive selector."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    neutral_weight: float = Field(default=_DEFAULTS["neutral_weight"], gt=0)
    min_weight: float = Field(default=_DEFAULTS["min_weight"], gt=0)
    max_weight: float = Field(default=_DEFAULTS["max_weight"], gt=0, allow_inf_nan=False)
    correct_decay: float = Field(default=_DEFAULTS["correct_decay"], gt=0, lt=1)
    wrong_boost: float = Field(default=_DEFAULTS["wrong_boost"], gt=0, lt=1)
    recency_window: int = Field(default=_DEFAULTS["recency_window"], ge=0)
    recency_floor: float = Field(default=_DEFAULTS["recency_floor"], gt=0, le=1)

    @model_validator(mode="after")
    def check_weight_order(self) -> "SelectionParams":
        """Neutral weight must sit inside [min_weight, max_weight]."""
        if not (self.min_weight <= self.neutral_weight <= self.max_weight):
            raise ValueError(
                "weights must satisfy min_weight <= neutral_weight <= max_weight, got "
                f"{self.min_weight} <= {self.neutral_weight} <= {self.max_weight}"
            )
        return self


def build_selection_params(overrides: dict[str, Any] | None = None) -> SelectionParams:
    """
    Merge overrides over the registry defaults.

    Args:
        overrides: Partial parameter dict (e.g. from settings.ADAPTIVE_PARAMS)

    Returns:
        Validated SelectionParams

    Raises:
        InvalidSelectionParamsError: If the merged parameters are invalid
    """
    merged = {**get_adaptive_selection_defaults(), **(overrides or {})}
    try:
        return SelectionParams(**merged)
    except ValidationError as exc:
        details = [
            {
                "field": ".".join(str(loc) for loc in error.get("loc", [])),
                "issue": error.get("msg", "Validation error"),
            }
            for error in exc.errors()
        ]
        raise InvalidSelectionParamsError(
            "Invalid adaptive selection parameters", details=details
        ) from exc


def normalize_params(params: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize parameters to canonical form for checksum computation.

    Sorts keys, converts to stable JSON representation.
    """
    return json.loads(json.dumps(params, sort_keys=True))


def compute_checksum(params: SelectionParams | dict[str, Any]) -> str:
    """
    Compute SHA256 checksum of normalized parameters.

    Args:
        params: SelectionParams or plain parameter dictionary

    Returns:
        Hex digest of SHA256 hash
    """
    if isinstance(params, SelectionParams):
        params = params.model_dump()
    normalized = normalize_params(params)
    params_str = json.dumps(normalized, sort_keys=True)
    return hashlib.sha256(params_str.encode()).hexdigest()
