"""Reporters for desugaring results and plans.

ConsoleReporter renders with rich; JSONReporter uses stdlib json.
"""

from decorlift.application.reporters._base import BaseReporter, format_value
from decorlift.application.reporters.console import ConsoleConfig, ConsoleReporter
from decorlift.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "format_value",
]
