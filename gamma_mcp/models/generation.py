"""Generation request models.

Caller-facing input for the generate tools. Accepts camelCase (wire names)
or snake_case keys. Validation failures raise pydantic.ValidationError before
any network call.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TextMode(str, Enum):
    """How the input text is treated."""

    GENERATE = "generate"
    CONDENSE = "condense"
    PRESERVE = "preserve"


class Format(str, Enum):
    """Output format type."""

    PRESENTATION = "presentation"
    DOCUMENT = "document"
    SOCIAL = "social"


class CardSplit(str, Enum):
    """Card-splitting strategy."""

    AUTO = "auto"
    INPUT_TEXT_BREAKS = "inputTextBreaks"


class TextAmount(str, Enum):
    BRIEF = "brief"
    MEDIUM = "medium"
    DETAILED = "detailed"
    EXTENSIVE = "extensive"


class ImageSource(str, Enum):
    AI_GENERATED = "aiGenerated"
    PICTOGRAPHIC = "pictographic"
    UNSPLASH = "unsplash"
    GIPHY = "giphy"
    GOOGLE_IMAGES = "googleImages"
    WEB_ALL_IMAGES = "webAllImages"
    WEB_FREE_TO_USE = "webFreeToUse"
    WEB_FREE_TO_USE_COMMERCIALLY = "webFreeToUseCommercially"
    PLACEHOLDER = "placeholder"
    NO_IMAGES = "noImages"
    NONE = "none"


class CardDimension(str, Enum):
    FLUID = "fluid"
    WIDE = "16x9"
    STANDARD = "4x3"
    PAGELESS = "pageless"
    LETTER = "letter"
    A4 = "a4"
    SQUARE = "1x1"
    PORTRAIT = "4x5"
    STORY = "9x16"


class ExportType(str, Enum):
    PDF = "pdf"
    PPTX = "pptx"


class WorkspaceAccess(str, Enum):
    NO_ACCESS = "noAccess"
    VIEW = "view"
    COMMENT = "comment"
    EDIT = "edit"
    FULL_ACCESS = "fullAccess"


class ExternalAccess(str, Enum):
    NO_ACCESS = "noAccess"
    VIEW = "view"
    COMMENT = "comment"
    EDIT = "edit"


# Card dimensions accepted by the service for each format
CARD_DIMENSIONS_BY_FORMAT: Dict[str, Tuple[str, ...]] = {
    Format.PRESENTATION.value: ("fluid", "16x9", "4x3"),
    Format.DOCUMENT.value: ("fluid", "pageless", "letter", "a4"),
    Format.SOCIAL.value: ("1x1", "4x5", "9x16"),
}

MIN_NUM_CARDS = 1
MAX_NUM_CARDS = 75


class _WireModel(BaseModel):
    """Immutable model using camelCase wire names, enum values stored as str."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
        extra="forbid",
    )


class TextOptions(_WireModel):
    amount: Optional[TextAmount] = None
    tone: Optional[str] = None
    audience: Optional[str] = None
    language: Optional[str] = None


class ImageOptions(_WireModel):
    source: Optional[ImageSource] = None
    model: Optional[str] = None
    style: Optional[str] = None


class CardOptions(_WireModel):
    dimensions: Optional[CardDimension] = None


class SharingOptions(_WireModel):
    workspace_access: Optional[WorkspaceAccess] = None
    external_access: Optional[ExternalAccess] = None


class GenerateRequest(_WireModel):
    """Request for the gamma_generate tools."""

    input_text: str = Field(..., min_length=1, description="Text used to generate content")
    text_mode: Optional[TextMode] = Field(None, description="Controls text generation mode")
    format: Optional[Format] = Field(None, description="Output format type")
    theme_name: Optional[str] = Field(None, description="Visual theme for the content")
    num_cards: Optional[int] = Field(None, description="Number of cards (clamped to 1-75)")
    card_split: Optional[CardSplit] = Field(None, description="Card-splitting strategy")
    additional_instructions: Optional[str] = None
    export_as: Optional[Union[ExportType, List[ExportType]]] = None
    text_options: Optional[TextOptions] = None
    image_options: Optional[ImageOptions] = None
    card_options: Optional[CardOptions] = None
    sharing_options: Optional[SharingOptions] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "inputText": "Launch plan for our Q3 product release",
                    "format": "presentation",
                    "numCards": 8,
                }
            ]
        }
    )


class StatusRequest(_WireModel):
    """Request for the gamma_get_status tool."""

    generation_id: str = Field(..., min_length=1, description="The ID of the generation to check")


class GenerateAndWaitRequest(GenerateRequest):
    """Request for gamma_generate_and_wait: submit, then poll for the URL."""

    max_attempts: Optional[int] = Field(None, ge=1, le=100, description="Status checks before giving up")


class EmptyRequest(_WireModel):
    """Request for tools that take no parameters."""
