"""
Aggo Research Server

Exposes the research agent as an MCP tool and a plain-text HTTP route.
"""

from aggo_server.server import build_server, main

__all__ = ["build_server", "main"]
