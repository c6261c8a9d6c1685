"""Unit tests for GammaClient (submission, status, themes)."""

import pytest

from gamma_mcp.config import GammaConfig
from gamma_mcp.core.errors import GammaAPIError, SubmissionIncompleteError, TransportError
from gamma_mcp.core.execution import ErrorHandler
from gamma_mcp.integrations.gamma import DEFAULT_THEMES, GammaClient
from gamma_mcp.models import GenerateRequest
from gamma_mcp.tests.fakes import FakeTransport, RecordingSleep, json_response


def client_with(config, *responses):
    transport = FakeTransport(*responses)
    handler = ErrorHandler(config.submit_retry_config(), sleep=RecordingSleep(), random_fn=lambda: 0.0)
    return GammaClient(config, transport=transport, error_handler=handler), transport


class TestBuildRequestBody:
    """Test merging caller input with configured defaults."""

    def test_minimal_request_uses_defaults(self, client):
        """Test inputText alone produces the default body and omits unset fields."""
        body = client.build_request_body(GenerateRequest(input_text="Launch plan"))

        assert body["inputText"] == "Launch plan"
        assert body["format"] == "presentation"
        assert body["numCards"] == 10
        assert body["cardSplit"] == "auto"
        assert body["textMode"] == "generate"
        assert body["textOptions"] == {"amount": "medium"}
        assert body["imageOptions"] == {"source": "aiGenerated"}
        for key in ("themeName", "additionalInstructions", "exportAs", "cardOptions", "sharingOptions"):
            assert key not in body

    def test_configured_defaults_apply_independently(self):
        """Test each configured default fills only the field the caller omitted."""
        config = GammaConfig(
            api_key="sk-gamma-x",
            default_format="document",
            default_text_mode="condense",
            default_num_cards=4,
            default_text_amount="brief",
            default_image_source="unsplash",
            default_export_as=("pdf",),
            default_card_dimensions="a4",
        )
        client, _ = client_with(config)

        body = client.build_request_body(
            GenerateRequest(input_text="x", text_mode="preserve", text_options={"tone": "calm"})
        )

        assert body["textMode"] == "preserve"
        assert body["format"] == "document"
        assert body["numCards"] == 4
        assert body["exportAs"] == ["pdf"]
        assert body["textOptions"] == {"amount": "brief", "tone": "calm"}
        assert body["imageOptions"] == {"source": "unsplash"}
        assert body["cardOptions"] == {"dimensions": "a4"}

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-5, 1), (1, 1), (60, 60), (75, 75), (200, 75)])
    def test_num_cards_clamped(self, client, requested, expected):
        """Test card count is clamped to [1, 75]."""
        body = client.build_request_body(GenerateRequest(input_text="x", num_cards=requested))

        assert body["numCards"] == expected

    def test_num_cards_default_only_for_auto_split(self, client):
        """Test the default card count is not sent for inputTextBreaks."""
        body = client.build_request_body(GenerateRequest(input_text="x", card_split="inputTextBreaks"))

        assert body["cardSplit"] == "inputTextBreaks"
        assert "numCards" not in body

    def test_invalid_dimension_for_format_is_dropped(self, client):
        """Test 16x9 on a social post is silently omitted."""
        body = client.build_request_body(
            GenerateRequest(input_text="x", format="social", card_options={"dimensions": "16x9"})
        )

        assert "cardOptions" not in body

    def test_valid_dimension_for_format_is_kept(self, client):
        """Test 4x5 on a social post is sent."""
        body = client.build_request_body(
            GenerateRequest(inputText="x", format="social", cardOptions={"dimensions": "4x5"})
        )

        assert body["cardOptions"] == {"dimensions": "4x5"}

    def test_optional_fields_and_camel_case_input(self, client):
        """Test camelCase input and nested option groups reach the body."""
        body = client.build_request_body(
            GenerateRequest.model_validate({
                "inputText": "Promo",
                "themeName": "dark",
                "additionalInstructions": "Keep it short",
                "exportAs": ["pdf", "pptx"],
                "imageOptions": {"style": "neon", "model": ""},
                "sharingOptions": {"workspaceAccess": "comment", "externalAccess": "view"},
            })
        )

        assert body["themeName"] == "dark"
        assert body["additionalInstructions"] == "Keep it short"
        assert body["exportAs"] == ["pdf", "pptx"]
        assert body["imageOptions"] == {"source": "aiGenerated", "style": "neon"}
        assert body["sharingOptions"] == {"workspaceAccess": "comment", "externalAccess": "view"}


class TestGenerate:
    """Test submission and response normalization."""

    @pytest.mark.asyncio
    async def test_generate_returns_handle(self, client, transport):
        """Test a successful submission is normalized into a handle."""
        transport.queue(json_response(200, {"generationId": "gen-1", "credits": {"deducted": 5, "remaining": 95}}))

        handle = await client.generate(GenerateRequest(input_text="Launch plan"))

        assert handle.generation_id == "gen-1"
        assert handle.status == "submitted"
        assert handle.url is None
        assert handle.message == "Generation request submitted successfully"
        assert handle.credits.remaining == 95
        assert transport.calls[0]["method"] == "POST"
        assert transport.calls[0]["path"] == "/v0.2/generations"
        assert transport.calls[0]["json"]["inputText"] == "Launch plan"
        assert transport.calls[0]["timeout_ms"] == 30000

    @pytest.mark.asyncio
    async def test_generate_accepts_id_and_gamma_url(self, client, transport):
        """Test id/gammaUrl fallbacks."""
        transport.queue(json_response(201, {"id": "gen-2", "status": "completed", "gammaUrl": "https://gamma.app/d/2"}))

        handle = await client.generate(GenerateRequest(input_text="x"))

        assert handle.generation_id == "gen-2"
        assert handle.status == "completed"
        assert handle.url == "https://gamma.app/d/2"

    @pytest.mark.asyncio
    async def test_missing_id_fails_without_retry(self, client, transport, sleeper):
        """Test a response without an identifier is a hard failure."""
        transport.queue(json_response(200, {"status": "pending"}))

        with pytest.raises(SubmissionIncompleteError):
            await client.generate(GenerateRequest(input_text="x"))

        assert len(transport.calls) == 1
        assert sleeper.count == 0

    @pytest.mark.asyncio
    async def test_server_errors_retried_then_succeed(self, client, transport, sleeper):
        """Test 5xx and network errors are retried with the same body."""
        transport.queue(
            json_response(503, {"message": "busy"}),
            TransportError("Connection reset"),
            json_response(200, {"generationId": "gen-3"}),
        )

        handle = await client.generate(GenerateRequest(input_text="x"))

        assert handle.generation_id == "gen-3"
        assert len(transport.calls) == 3
        assert transport.calls[0]["json"] == transport.calls[2]["json"]
        assert sleeper.delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_client_error_not_retried(self, client, transport):
        """Test a 400 propagates after one attempt."""
        transport.queue(json_response(400, {"message": "inputText too long"}))

        with pytest.raises(GammaAPIError) as exc_info:
            await client.generate(GenerateRequest(input_text="x"))

        assert str(exc_info.value) == "API Error: 400 - inputText too long"
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_retries_exhausted(self, client, transport):
        """Test the default budget gives four attempts."""
        transport.queue(*[json_response(500) for _ in range(4)])

        with pytest.raises(GammaAPIError):
            await client.generate(GenerateRequest(input_text="x"))

        assert len(transport.calls) == 4


class TestGetStatus:
    """Test single status checks."""

    @pytest.mark.asyncio
    async def test_status_snapshot(self, client, transport):
        """Test a status body is normalized into a snapshot."""
        transport.queue(json_response(200, {"status": "completed", "gammaUrl": "https://gamma.app/d/1"}))

        snapshot = await client.get_status("gen-1")

        assert snapshot.generation_id == "gen-1"
        assert snapshot.url == "https://gamma.app/d/1"
        assert snapshot.is_complete
        assert transport.calls[0]["path"] == "/v0.2/generations/gen-1"

    @pytest.mark.asyncio
    async def test_404_is_synthetic_not_found(self, client, transport):
        """Test 404 produces a not_found snapshot instead of raising."""
        transport.queue(json_response(404, {"message": "missing"}))

        snapshot = await client.get_status("gen-9")

        assert snapshot.status == "not_found"
        assert snapshot.is_terminal_failure
        assert "not found" in snapshot.error

    @pytest.mark.asyncio
    async def test_loosely_typed_body_is_tolerated(self, client, transport):
        """Test a numeric status and unparseable credits do not raise."""
        transport.queue(json_response(200, {"status": 2, "credits": {"deducted": "lots"}}))

        snapshot = await client.get_status("gen-1")

        assert snapshot.status == "2"
        assert snapshot.credits is None
        assert not snapshot.is_complete

    @pytest.mark.asyncio
    async def test_status_does_not_retry(self, client, transport):
        """Test status checks raise on the first transport failure."""
        transport.queue(json_response(502))

        with pytest.raises(GammaAPIError):
            await client.get_status("gen-1")

        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_generation_id_is_path_escaped(self, client, transport):
        """Test ids cannot escape the generations path."""
        transport.queue(json_response(200, {"status": "pending"}))

        await client.get_status("../themes")

        assert transport.calls[0]["path"] == "/v0.2/generations/..%2Fthemes"


class TestListThemes:
    """Test theme listing with fallback."""

    @pytest.mark.asyncio
    async def test_themes_from_service(self, client, transport):
        """Test themes returned by the service are used."""
        transport.queue(json_response(200, {"themes": [{"id": "oasis", "name": "Oasis"}]}))

        themes = await client.list_themes()

        assert [t.id for t in themes] == ["oasis"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [json_response(404), json_response(500), TransportError("refused"), json_response(200, {})],
    )
    async def test_fallback_to_builtin(self, client, transport, response):
        """Test failures or empty bodies fall back to built-in themes."""
        transport.queue(response)

        themes = await client.list_themes()

        assert themes == DEFAULT_THEMES
        assert len(themes) == 8

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{"themes": [{"id": "x", "title": "No name"}]}, {"themes": "oasis"}],
    )
    async def test_malformed_themes_fall_back(self, client, transport, body):
        """Test theme entries that do not fit the model fall back to built-ins."""
        transport.queue(json_response(200, body))

        themes = await client.list_themes()

        assert themes == DEFAULT_THEMES


class TestLifecycle:
    """Test resource handling."""

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_transport(self, config):
        """Test leaving the context closes the transport."""
        client, transport = client_with(config)

        async with client:
            pass

        assert transport.closed
