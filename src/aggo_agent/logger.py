"""
Logger Configuration Module

Handles logging setup for research operations.
"""

import logging
import os
from pathlib import Path

from strands.telemetry import StrandsTelemetry

strands_telemetry: StrandsTelemetry | None = None


def setup_telemetry() -> None:
    global strands_telemetry
    if strands_telemetry is None:
        strands_telemetry = StrandsTelemetry()
        if "OTEL_EXPORTER_OTLP_ENDPOINT" in os.environ:
            strands_telemetry.setup_otlp_exporter()


def create_logger(log_dir: str = "logs") -> logging.Logger:
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    # Configure strands logger to write to file
    strands_logger = logging.getLogger("strands")
    strands_logger.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(
        log_path / "strands_agents.log", encoding="utf-8"
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    strands_logger.addHandler(file_handler)

    # Create file handler for research results
    research_handler = logging.FileHandler(
        log_path / "research_results.log", encoding="utf-8"
    )
    research_handler.setFormatter(logging.Formatter("%(message)s"))

    research_logger = logging.getLogger("research")
    research_logger.setLevel(logging.INFO)
    research_logger.addHandler(research_handler)

    return research_logger


research_logger: logging.Logger | None = None


def setup_logging(log_dir: str = "logs") -> logging.Logger:
    global research_logger
    if research_logger is None:
        setup_telemetry()
        research_logger = create_logger(log_dir)
    return research_logger
