"""
Aggo Research Agent - Command Line Entry Point

Runs a single research invocation and prints the plain-text response.
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from aggo_agent.exceptions import ConfigurationError, ResearchError
from aggo_agent.orchestrator import create_orchestrator
from aggo_agent.settings import get_settings


async def run(topic: str) -> int:
    try:
        orchestrator = create_orchestrator(get_settings())
    except (ConfigurationError, ValidationError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        response = await orchestrator.research(topic)
    except ResearchError as e:
        print(f"❌ Research failed ({e.kind}): {e}", file=sys.stderr)
        return 1

    print(response)
    return 0


def main() -> None:
    """
    Run the research agent with a user-provided topic
    """
    parser = argparse.ArgumentParser(
        description="Research and summarize a topic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aggo-research "Durable execution for AI agents"
  aggo-research "Climate Change Impact on Agriculture"
        """,
    )
    parser.add_argument("topic", help="Research topic to summarize")
    args = parser.parse_args()

    if not args.topic.strip():
        parser.error("topic must not be empty")

    load_dotenv()
    sys.exit(asyncio.run(run(args.topic)))


if __name__ == "__main__":
    main()
