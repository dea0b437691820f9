#!/usr/bin/env python3
"""
Application Starter for Policy Picker
=====================================

1. Loads settings
2. Sets up logging
3. Runs the picker and prints the outcome
"""

import logging
import sys

from rich.console import Console

from .config.log_setup import setup_logging
from .config.settings import get_settings
from .exceptions.config import ConfigError
from .ui.textual.app import PolicyPickerApp

console = Console(stderr=True)


def main() -> int:
    try:
        settings = get_settings()
        setup_logging(settings)
    except ConfigError as e:
        console.print(f"[bold red]Configuration Error:[/] {e.message}")
        console.print(f"[dim]{e.user_hint}[/]")
        return 1

    logger = logging.getLogger(__name__)
    logger.info("Starting picker with policy %s", settings.approval_policy)

    app = PolicyPickerApp(settings.approval_policy)
    chosen = app.run()

    if chosen is None:
        console.print(f"Approval policy unchanged: [green]{settings.approval_policy}[/]")
        return 0

    console.print(f"Approval policy set to: [green]{chosen}[/]")
    # stdout carries only the machine-readable result
    print(chosen)
    return 0


if __name__ == "__main__":
    sys.exit(main())
