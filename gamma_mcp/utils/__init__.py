"""Utilities for the Gamma MCP tools."""
