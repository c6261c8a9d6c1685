"""HTTP entry point for the Gamma tools.

Builds configuration once from the environment and serves the tools
registry through FastAPI.

Usage:
    Development: uvicorn gamma_mcp.main:app --reload --port 8000
    Production: uvicorn gamma_mcp.main:app --host 0.0.0.0 --port 8000
"""

from dotenv import load_dotenv
from fastapi import FastAPI

from gamma_mcp.api import create_app
from gamma_mcp.config import GammaConfig
from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.tools.registry import get_tools_registry


def build_app() -> FastAPI:
    """Load configuration and create the app with a bound tools registry."""
    load_dotenv()
    client = GammaClient(GammaConfig.from_env())
    return create_app(tools_registry=get_tools_registry(client))


app = build_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gamma_mcp.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
