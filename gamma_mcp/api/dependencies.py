"""FastAPI dependencies for the Gamma tools API."""

from typing import Any, Dict

from fastapi import Request


def get_registry_from_state(request: Request) -> Dict[str, Any]:
    """Return the tools registry stored on app.state by create_app (empty if unset)."""
    return getattr(request.app.state, "tools_registry", {})
