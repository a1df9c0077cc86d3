"""Command-line interface for summarizer-init."""

from __future__ import annotations

from summarizer_init.cli.app import main as main
from summarizer_init.cli.parser import build_parser as build_parser
from summarizer_init.cli.wizard import run_wizard as run_wizard
from summarizer_init.contracts.config import RunConfig as RunConfig

__all__ = ["RunConfig", "build_parser", "main", "run_wizard"]
