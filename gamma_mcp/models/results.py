"""Result models: what the service returns and what callers receive."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from gamma_mcp.core.errors import GammaAPIError, GammaError, TransportError

TERMINAL_FAILURE_STATUSES = frozenset({"failed", "error", "not_found"})


class Credits(BaseModel):
    """Credit usage counters reported by the service."""

    model_config = ConfigDict(frozen=True, extra="allow")

    deducted: Optional[float] = None
    remaining: Optional[float] = None


class GenerationHandle(BaseModel):
    """Identifier and initial state returned by a successful submission."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    generation_id: str = Field(..., min_length=1)
    status: str = "submitted"
    url: Optional[str] = None
    gamma_url: Optional[str] = None
    message: Optional[str] = None
    credits: Optional[Credits] = None


class StatusSnapshot(BaseModel):
    """One observation of generation progress.

    Completion is decided by URL presence alone; status labels are not
    contractually stable.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    generation_id: str
    status: Optional[str] = None
    url: Optional[str] = None
    gamma_url: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None
    credits: Optional[Credits] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.url)

    @property
    def is_terminal_failure(self) -> bool:
        return not self.is_complete and self.status in TERMINAL_FAILURE_STATUSES


class Theme(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    preview: Optional[str] = None


class GenerationResult(BaseModel):
    """Normalized caller-facing result for every generation tool.

    Success path carries the id, status and (eventually) the URL. Failure
    path carries the id if known, a status of error/timeout/not_found and
    the error text.
    """

    model_config = ConfigDict(populate_by_name=True)

    generation_id: str = Field("", alias="generationId")
    status: str
    url: Optional[str] = None
    gamma_url: Optional[str] = Field(None, alias="gammaUrl")
    message: Optional[str] = None
    error: Optional[str] = None
    credits: Optional[Credits] = None

    @classmethod
    def from_handle(cls, handle: GenerationHandle) -> "GenerationResult":
        return cls(
            generation_id=handle.generation_id,
            status=handle.status,
            url=handle.url,
            gamma_url=handle.gamma_url,
            message=handle.message,
            credits=handle.credits,
        )

    @classmethod
    def from_snapshot(cls, snapshot: StatusSnapshot) -> "GenerationResult":
        return cls(
            generation_id=snapshot.generation_id,
            status=snapshot.status or "unknown",
            url=snapshot.url,
            gamma_url=snapshot.gamma_url,
            message=snapshot.message,
            error=snapshot.error,
            credits=snapshot.credits,
        )

    @classmethod
    def from_error(cls, error: GammaError, generation_id: Optional[str] = None) -> "GenerationResult":
        """Translate an expected operational failure into the failure shape."""
        if isinstance(error, GammaAPIError):
            return cls(generation_id=generation_id or "", status="error", error=str(error))

        if isinstance(error, TransportError):
            if error.timed_out:
                return cls(
                    generation_id=generation_id or "",
                    status="timeout",
                    error="Request timed out while waiting for Gamma API response",
                )
            return cls(
                generation_id=generation_id or "",
                status="error",
                error=f"Network error: {error.message}",
            )

        return cls(generation_id=generation_id or "", status="error", error=str(error))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with wire names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
