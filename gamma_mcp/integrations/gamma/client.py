"""Gamma API client.

Builds generation requests from caller input and configured defaults,
submits them through the ErrorHandler, and normalizes responses.
"""

import dataclasses
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from gamma_mcp import __version__
from gamma_mcp.config import GammaConfig
from gamma_mcp.core.errors import GammaAPIError, GammaError, SubmissionIncompleteError
from gamma_mcp.core.execution.error_handler import ErrorHandler
from gamma_mcp.core.logging import logger
from gamma_mcp.core.polling import StatusPoller
from gamma_mcp.integrations.gamma.transport import HttpxTransport, Transport, TransportResponse
from gamma_mcp.models.generation import (
    CARD_DIMENSIONS_BY_FORMAT,
    MAX_NUM_CARDS,
    MIN_NUM_CARDS,
    CardOptions,
    GenerateRequest,
    ImageOptions,
    TextOptions,
)
from gamma_mcp.models.results import Credits, GenerationHandle, StatusSnapshot, Theme

GENERATIONS_PATH = "/v0.2/generations"
THEMES_PATH = "/v0.2/themes"

DEFAULT_THEMES: List[Theme] = [
    Theme(id="minimal", name="Minimal", description="Clean and simple design"),
    Theme(id="modern", name="Modern", description="Contemporary and sleek"),
    Theme(id="professional", name="Professional", description="Business-oriented design"),
    Theme(id="creative", name="Creative", description="Artistic and colorful"),
    Theme(id="dark", name="Dark", description="Dark mode theme"),
    Theme(id="nature", name="Nature", description="Natural and organic feel"),
    Theme(id="tech", name="Tech", description="Technology-focused design"),
    Theme(id="vintage", name="Vintage", description="Classic and retro style"),
]


def clamp_num_cards(value: int) -> int:
    return max(MIN_NUM_CARDS, min(MAX_NUM_CARDS, value))


def clean_dict(values: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Drop None and empty-string entries; None if nothing is left."""
    cleaned = {k: v for k, v in values.items() if v is not None and v != ""}
    return cleaned or None


class GammaClient:
    """Client for the Gamma generation API.

    Holds no per-request state: every call builds, sends and normalizes on
    its own stack. The transport's connection pool is the only shared resource.
    """

    def __init__(
        self,
        config: GammaConfig,
        transport: Optional[Transport] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """Initialize Gamma client.

        Args:
            config: Process configuration (credential, limits, defaults)
            transport: Optional transport override (defaults to HttpxTransport)
            error_handler: Optional ErrorHandler for submission retries
        """
        self.config = config
        self.transport = transport or HttpxTransport(
            base_url=config.base_url,
            default_headers={
                "X-API-KEY": config.api_key,
                "Content-Type": "application/json",
                "User-Agent": f"gamma-mcp-server/{__version__}",
            },
            timeout_ms=config.timeout_ms,
        )
        self.error_handler = error_handler or ErrorHandler(config.submit_retry_config())

    async def __aenter__(self) -> "GammaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.transport.aclose()

    # Submission

    def build_request_body(self, request: GenerateRequest) -> Dict[str, Any]:
        """Merge a request with configured defaults into the wire body.

        Every optional field falls back independently. Unset optional fields
        are omitted.
        """
        cfg = self.config
        text_mode = request.text_mode or cfg.default_text_mode or "generate"
        fmt = request.format or cfg.default_format or "presentation"
        card_split = request.card_split or cfg.default_card_split or "auto"

        body: Dict[str, Any] = {
            "inputText": request.input_text,
            "textMode": text_mode,
            "format": fmt,
            "cardSplit": card_split,
        }

        if request.theme_name:
            body["themeName"] = request.theme_name

        num_cards = self._resolve_num_cards(request.num_cards, card_split)
        if num_cards is not None:
            body["numCards"] = num_cards

        if request.additional_instructions:
            body["additionalInstructions"] = request.additional_instructions

        export_as = request.export_as or cfg.get_default_export_as()
        if export_as:
            body["exportAs"] = export_as

        text_options = self._build_text_options(request.text_options)
        if text_options:
            body["textOptions"] = text_options

        image_options = self._build_image_options(request.image_options)
        if image_options:
            body["imageOptions"] = image_options

        card_options = self._build_card_options(request.card_options, fmt)
        if card_options:
            body["cardOptions"] = card_options

        if request.sharing_options:
            sharing_options = clean_dict(request.sharing_options.model_dump(by_alias=True))
            if sharing_options:
                body["sharingOptions"] = sharing_options

        return body

    async def generate(self, request: GenerateRequest) -> GenerationHandle:
        """Submit a generation request, retrying transient failures.

        Returns:
            GenerationHandle with the generation id

        Raises:
            GammaAPIError: Non-retryable HTTP failure, or retries exhausted
            TransportError: Network failure after retries exhausted
            SubmissionIncompleteError: Response carried no generation id
        """
        body = self.build_request_body(request)

        async def submit() -> GenerationHandle:
            response = await self._request("POST", GENERATIONS_PATH, json_body=body)
            return self._parse_handle(response.body)

        handle = await self.error_handler.execute_with_retry(submit, operation_name="submit_generation")

        logger.info(
            "generation_submitted",
            generation_id=handle.generation_id,
            status=handle.status,
            format=body["format"],
            has_url=bool(handle.url),
        )
        return handle

    # Status

    async def get_status(self, generation_id: str) -> StatusSnapshot:
        """Check generation status once (no internal retry).

        A 404 yields a synthetic not_found snapshot rather than an error.

        Raises:
            GammaAPIError: Any other non-success status
            TransportError: No response received
        """
        path = f"{GENERATIONS_PATH}/{quote(generation_id, safe='')}"
        try:
            response = await self._request("GET", path)
        except GammaAPIError as e:
            if e.status_code == 404:
                return StatusSnapshot(
                    generation_id=generation_id,
                    status="not_found",
                    error="Generation not found or status endpoint not available in beta",
                )
            raise

        data = response.body if isinstance(response.body, dict) else {}
        return StatusSnapshot(
            generation_id=generation_id,
            status=data.get("status"),
            url=data.get("url") or data.get("gammaUrl"),
            gamma_url=data.get("gammaUrl"),
            message=data.get("message"),
            error=data.get("error"),
            credits=self._parse_credits(data.get("credits")),
        )

    def status_poller(self, max_attempts: Optional[int] = None) -> StatusPoller:
        """Build a StatusPoller over get_status using the configured schedule.

        Shares the error handler's sleep and jitter source, so one injection
        point controls every wait this client makes.
        """
        poll_config = self.config.poll_config()
        if max_attempts:
            poll_config = dataclasses.replace(poll_config, max_attempts=max_attempts)

        return StatusPoller(
            self.get_status,
            poll_config,
            sleep=self.error_handler.sleep,
            random_fn=self.error_handler.random_fn,
        )

    # Themes

    async def list_themes(self) -> List[Theme]:
        """List themes from the service, falling back to the built-in set."""
        try:
            response = await self._request("GET", THEMES_PATH)
        except GammaError as e:
            logger.info("themes_fallback", reason=str(e))
            return list(DEFAULT_THEMES)

        data = response.body if isinstance(response.body, dict) else {}
        themes = data.get("themes")
        if not themes or not isinstance(themes, list):
            return list(DEFAULT_THEMES)

        try:
            return [Theme.model_validate(theme) for theme in themes]
        except ValidationError as e:
            logger.warning("themes_malformed", errors=e.error_count())
            return list(DEFAULT_THEMES)

    # Internals

    async def _request(
        self, method: str, path: str, json_body: Optional[Dict[str, Any]] = None
    ) -> TransportResponse:
        response = await self.transport.send(
            method, path, json_body=json_body, timeout_ms=self.config.timeout_ms
        )
        if not response.ok:
            data = response.body if isinstance(response.body, dict) else {}
            raise GammaAPIError(
                response.status_code,
                message=data.get("message") or data.get("error"),
                headers=response.headers,
            )
        return response

    def _parse_handle(self, data: Any) -> GenerationHandle:
        if not isinstance(data, dict):
            raise SubmissionIncompleteError("Gamma API returned an empty submission response")

        generation_id = data.get("generationId") or data.get("id")
        if not generation_id:
            raise SubmissionIncompleteError(
                data.get("error") or "No generationId returned from Gamma"
            )

        return GenerationHandle(
            generation_id=str(generation_id),
            status=data.get("status") or "submitted",
            url=data.get("url") or data.get("gammaUrl"),
            gamma_url=data.get("gammaUrl"),
            message=data.get("message") or "Generation request submitted successfully",
            credits=self._parse_credits(data.get("credits")),
        )

    @staticmethod
    def _parse_credits(value: Any) -> Optional[Credits]:
        if not isinstance(value, dict):
            return None
        try:
            return Credits.model_validate(value)
        except ValidationError:
            logger.debug("credits_unparseable", credits=value)
            return None

    def _resolve_num_cards(self, requested: Optional[int], card_split: str) -> Optional[int]:
        if requested is not None:
            return clamp_num_cards(requested)
        if card_split == "auto":
            return clamp_num_cards(self.config.default_num_cards)
        return None

    def _build_text_options(self, options: Optional[TextOptions]) -> Optional[Dict[str, Any]]:
        options = options or TextOptions()
        return clean_dict({
            "amount": options.amount or self.config.default_text_amount or "medium",
            "tone": options.tone,
            "audience": options.audience,
            "language": options.language,
        })

    def _build_image_options(self, options: Optional[ImageOptions]) -> Optional[Dict[str, Any]]:
        options = options or ImageOptions()
        return clean_dict({
            "source": options.source or self.config.default_image_source or "aiGenerated",
            "model": options.model,
            "style": options.style,
        })

    def _build_card_options(self, options: Optional[CardOptions], fmt: str) -> Optional[Dict[str, Any]]:
        dimension = (options.dimensions if options else None) or self.config.default_card_dimensions
        if not dimension:
            return None

        allowed = CARD_DIMENSIONS_BY_FORMAT.get(fmt)
        if allowed and dimension not in allowed:
            logger.debug("card_dimensions_dropped", dimensions=dimension, format=fmt)
            return None

        return {"dimensions": dimension}
