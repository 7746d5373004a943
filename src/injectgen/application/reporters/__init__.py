"""Reporters for generation runs."""

from injectgen.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = ["ConsoleConfig", "ConsoleReporter"]
