"""
Research MCP Server Implementation

Serves `research(topic)` as an MCP tool and as
`GET /aggo-agent-api/research?topic=...` returning plain text.
"""

import logging

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from aggo_agent import ResearchOrchestrator, setup_logging
from aggo_agent.exceptions import ConfigurationError, ResearchError
from aggo_agent.orchestrator import create_orchestrator
from aggo_agent.settings import Settings, get_settings

logger = logging.getLogger(__name__)

RESEARCH_ROUTE = "/aggo-agent-api/research"


async def handle_research(
    orchestrator: ResearchOrchestrator, topic: str | None
) -> tuple[int, str]:
    """Run one invocation and map it to an HTTP status and plain-text body."""
    if topic is None or not topic.strip():
        return 400, "Missing required query parameter: topic"

    outcome = await orchestrator.run(topic)
    if outcome.ok:
        return 200, outcome.unwrap()

    error: ResearchError = outcome.error  # type: ignore[assignment]
    return error.http_status, f"Research failed ({error.kind}): {error}"


def build_server(
    orchestrator: ResearchOrchestrator, settings: Settings | None = None
) -> FastMCP:
    """Create the FastMCP server around an already-built orchestrator."""
    settings = settings or get_settings()
    mcp = FastMCP("Aggo Research", host=settings.server_host, port=settings.server_port)

    @mcp.tool()
    async def research(topic: str) -> str:
        """
        <tool_description>
        Research and summarize a topic.

        Runs a bounded web search, asks the language model for a short overview
        and returns it followed by a ranked list of the best links.
        </tool_description>

        Args:
            topic: The research topic, as a short focused question or statement

        Returns:
            Overview text plus best links, or an error message
        """
        status, body = await handle_research(orchestrator, topic)
        if status != 200:
            return f"Error: {body}"
        return body

    @mcp.custom_route(RESEARCH_ROUTE, methods=["GET"])
    async def research_route(request: Request) -> PlainTextResponse:
        status, body = await handle_research(
            orchestrator, request.query_params.get("topic")
        )
        return PlainTextResponse(body, status_code=status)

    return mcp


def main() -> None:
    load_dotenv()
    try:
        settings = get_settings()
        setup_logging(settings.log_dir)
        orchestrator = create_orchestrator(settings)
    except (ConfigurationError, ValidationError) as e:
        logger.error("Invalid configuration: %s", e)
        raise SystemExit(f"Configuration error: {e}") from e

    mcp = build_server(orchestrator, settings)
    mcp.run(transport=settings.server_transport)


if __name__ == "__main__":
    main()
