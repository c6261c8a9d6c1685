"""MCP server for the Gamma tools.

Supports:
  - stdio (default, spawned by an MCP host)
  - sse / streamable-http (remote server mode)

Usage:
    gamma-mcp-server
    gamma-mcp-server --transport streamable-http --port 8787
"""

import argparse
import json
import os
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv

from gamma_mcp.config import GammaConfig
from gamma_mcp.core.execution import ToolExecutor
from gamma_mcp.core.logging import logger
from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.models import (
    CardOptions,
    CardSplit,
    ExportType,
    Format,
    ImageOptions,
    SharingOptions,
    TextMode,
    TextOptions,
)
from gamma_mcp.tools import get_tools_registry


async def run_tool(executor: ToolExecutor, tool_name: str, params: Dict[str, Any]) -> str:
    """Execute a registry tool and render its data as JSON text.

    Raises:
        ValueError: If the tool is unknown or parameters are invalid
    """
    # Tool handlers pass locals(), which also carries closure cells
    fields = executor.tools[tool_name]["input_model"].model_fields
    accepted = set(fields) | {f.alias for f in fields.values() if f.alias}
    result = await executor.execute(
        tool_name, {k: v for k, v in params.items() if k in accepted and v is not None}
    )
    if not result["success"]:
        raise ValueError(result["error"])
    return json.dumps(result["data"], indent=2)


def build_mcp_app(
    config: GammaConfig,
    host: str = "127.0.0.1",
    port: int = 8787,
    client: Optional[GammaClient] = None,
):
    """Build the FastMCP app with all Gamma tools bound to one client.

    Tool arguments use the Gamma wire names (inputText, generationId, ...).
    """
    from mcp.server.fastmcp import FastMCP

    registry = get_tools_registry(client or GammaClient(config))
    executor = ToolExecutor(registry)

    mcp = FastMCP("gamma-mcp-server", host=host, port=port)

    def summary(name: str) -> str:
        return registry[name]["doc"].split("\n\n")[0]

    @mcp.tool(name="gamma_generate", description=summary("gamma_generate"))
    async def _generate(
        inputText: str,
        textMode: Optional[TextMode] = None,
        format: Optional[Format] = None,
        themeName: Optional[str] = None,
        numCards: Optional[int] = None,
        cardSplit: Optional[CardSplit] = None,
        additionalInstructions: Optional[str] = None,
        exportAs: Optional[Union[ExportType, List[ExportType]]] = None,
        textOptions: Optional[TextOptions] = None,
        imageOptions: Optional[ImageOptions] = None,
        cardOptions: Optional[CardOptions] = None,
        sharingOptions: Optional[SharingOptions] = None,
    ) -> str:
        return await run_tool(executor, "gamma_generate", locals())

    @mcp.tool(name="gamma_generate_and_wait", description=summary("gamma_generate_and_wait"))
    async def _generate_and_wait(
        inputText: str,
        textMode: Optional[TextMode] = None,
        format: Optional[Format] = None,
        themeName: Optional[str] = None,
        numCards: Optional[int] = None,
        cardSplit: Optional[CardSplit] = None,
        additionalInstructions: Optional[str] = None,
        exportAs: Optional[Union[ExportType, List[ExportType]]] = None,
        textOptions: Optional[TextOptions] = None,
        imageOptions: Optional[ImageOptions] = None,
        cardOptions: Optional[CardOptions] = None,
        sharingOptions: Optional[SharingOptions] = None,
        maxAttempts: Optional[int] = None,
    ) -> str:
        return await run_tool(executor, "gamma_generate_and_wait", locals())

    @mcp.tool(name="gamma_get_status", description=summary("gamma_get_status"))
    async def _get_status(generationId: str) -> str:
        return await run_tool(executor, "gamma_get_status", {"generationId": generationId})

    @mcp.tool(name="gamma_get_themes", description=summary("gamma_get_themes"))
    async def _get_themes() -> str:
        return await run_tool(executor, "gamma_get_themes", {})

    return mcp


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Gamma MCP server")
    parser.add_argument("--transport", default="stdio", choices=["stdio", "sse", "streamable-http"])
    parser.add_argument("--host", default=os.environ.get("MCP_SERVER_HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("MCP_SERVER_PORT", "8787")))
    args = parser.parse_args()

    config = GammaConfig.from_env()
    app = build_mcp_app(config, host=args.host, port=args.port)

    logger.info("mcp_server_starting", transport=args.transport)
    app.run(transport=args.transport)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
