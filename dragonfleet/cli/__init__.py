"""
cli/ - Command Line Interface

Provides command-line access to a fleet repository:
- Interactive REPL
- Batch mode execution from script files
- Fleet commands (add-rocket, add-mission, assign, remove, repair, fix, end)
- Query commands (summary, show, history)
"""

from .core import (
    CLIContext,
    OutputFormat,
    CommandResult,
    CommandRegistry,
    CLICommand,
    CommandParser,
    UsageError,
    format_output,
)

from .commands import (
    AddRocketCommand,
    AddMissionCommand,
    AssignCommand,
    RemoveCommand,
    RepairCommand,
    FixCommand,
    EndCommand,
    SummaryCommand,
    ShowCommand,
    HistoryCommand,
    DEFAULT_COMMANDS,
    build_registry,
)

from .repl import REPL, main


__all__ = [
    # Core
    "CLIContext",
    "OutputFormat",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    "CommandParser",
    "UsageError",
    "format_output",
    # Commands
    "AddRocketCommand",
    "AddMissionCommand",
    "AssignCommand",
    "RemoveCommand",
    "RepairCommand",
    "FixCommand",
    "EndCommand",
    "SummaryCommand",
    "ShowCommand",
    "HistoryCommand",
    "DEFAULT_COMMANDS",
    "build_registry",
    # REPL
    "REPL",
    "main",
]
