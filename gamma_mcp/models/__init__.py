"""Pydantic models for the Gamma MCP tools.

Organized by role:
- generation: Caller input (request body fields, option groups, enums)
- results: Service responses and the normalized caller-facing result
"""

from gamma_mcp.models.generation import (
    CARD_DIMENSIONS_BY_FORMAT,
    MAX_NUM_CARDS,
    MIN_NUM_CARDS,
    CardDimension,
    CardOptions,
    CardSplit,
    EmptyRequest,
    ExportType,
    ExternalAccess,
    Format,
    GenerateAndWaitRequest,
    GenerateRequest,
    ImageOptions,
    ImageSource,
    SharingOptions,
    StatusRequest,
    TextAmount,
    TextMode,
    TextOptions,
    WorkspaceAccess,
)
from gamma_mcp.models.results import (
    TERMINAL_FAILURE_STATUSES,
    Credits,
    GenerationHandle,
    GenerationResult,
    StatusSnapshot,
    Theme,
)

__all__ = [
    # Generation input
    "CARD_DIMENSIONS_BY_FORMAT",
    "MAX_NUM_CARDS",
    "MIN_NUM_CARDS",
    "CardDimension",
    "CardOptions",
    "CardSplit",
    "EmptyRequest",
    "ExportType",
    "ExternalAccess",
    "Format",
    "GenerateAndWaitRequest",
    "GenerateRequest",
    "ImageOptions",
    "ImageSource",
    "SharingOptions",
    "StatusRequest",
    "TextAmount",
    "TextMode",
    "TextOptions",
    "WorkspaceAccess",
    # Results
    "TERMINAL_FAILURE_STATUSES",
    "Credits",
    "GenerationHandle",
    "GenerationResult",
    "StatusSnapshot",
    "Theme",
]
