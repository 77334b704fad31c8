"""Configuration introspection utilities for debugging and validation.

This module provides utilities to inspect the effective configuration and
check that it can be resolved from the current environment.
"""

import argparse
import json
import sys
from typing import Any

from . import load_settings

# ruff: noqa: T201


def get_config_info(env_file: str | None = None) -> dict[str, Any]:
    """Get structured configuration information for programmatic use.

    Returns:
        Dictionary containing configuration details and validation status
    """
    try:
        settings = load_settings(env_file)
    except Exception as e:
        return {
            "status": "invalid",
            "error": str(e),
            "config": None,
            "warnings": [],
        }

    return {
        "status": "valid",
        "config": settings.to_dict(),
        "warnings": _get_config_warnings(settings.api_key),
    }


def _get_config_warnings(api_key: str | None) -> list[str]:
    warnings: list[str] = []
    if not api_key:
        warnings.append(
            "No default API key: every call must pass its own key or it "
            "returns a fallback result."
        )
    return warnings


def print_config_debug(env_file: str | None = None) -> None:
    """Print the effective configuration and any warnings."""
    info = get_config_info(env_file)
    if info["status"] != "valid":
        print(f"❌ Configuration Error: {info['error']}", file=sys.stderr)
        sys.exit(1)

    print("=== Effective Configuration ===")
    for field, value in info["config"].items():
        print(f"  {field}: {value}")

    print("\n=== Validation Results ===")
    print("✅ Configuration is valid")
    if info["warnings"]:
        print("\n⚠️  Warnings:")
        for warning in info["warnings"]:
            print(f"  - {warning}")


def main(argv: list[str] | None = None) -> None:
    """Entry point for ``python -m reading_coach.config``."""
    parser = argparse.ArgumentParser(
        prog="python -m reading_coach.config",
        description="Show the effective reading coach configuration.",
    )
    parser.add_argument("--env-file", help="Read this .env file first")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--json", action="store_true", help="Print JSON output")
    group.add_argument(
        "--check", action="store_true", help="Exit non-zero if config is invalid"
    )
    args = parser.parse_args(argv)

    if args.check:
        info = get_config_info(args.env_file)
        sys.exit(0 if info["status"] == "valid" else 1)
    if args.json:
        print(json.dumps(get_config_info(args.env_file), indent=2, ensure_ascii=False))
        return
    print_config_debug(args.env_file)
