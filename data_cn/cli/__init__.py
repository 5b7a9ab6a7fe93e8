"""Command line interface for the data_cn tools."""

from .run_validate import build_parser, main

__all__ = ["build_parser", "main"]
