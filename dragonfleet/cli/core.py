"""
cli/core.py - Command objects, results and output rendering

Every command owns an argparse parser built from its configure_parser().
Parser failures raise UsageError instead of exiting, and domain errors
raised while a command runs come back as failed CommandResults carrying
the error's code and details.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod
import argparse
import json
import logging

from dragonfleet.errors import DragonError
from dragonfleet.repository import DragonRepository

logger = logging.getLogger("cli")


class OutputFormat(Enum):
    """How results are printed."""
    TEXT = "text"
    JSON = "json"  # --json


@dataclass
class CLIContext:
    """State shared by the commands of one CLI session."""

    repository: DragonRepository = field(default_factory=DragonRepository)
    output_format: OutputFormat = OutputFormat.TEXT
    verbose: bool = False  # Log tracebacks of unexpected failures


@dataclass
class CommandResult:
    """Outcome of one command line."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None

    exit_code: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }

    @classmethod
    def failure(cls, error: str, data: Any = None, exit_code: int = 1) -> "CommandResult":
        return cls(success=False, error=error, data=data, exit_code=exit_code)

    @classmethod
    def from_error(cls, error: DragonError) -> "CommandResult":
        """Failed result for a domain error; data holds its code and details."""
        return cls.failure(error.message, data=error.to_dict())


class UsageError(Exception):
    """A command line does not match the command's arguments."""


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError rather than exiting."""

    def error(self, message: str) -> None:
        raise UsageError(f"{self.prog}: {message}")


class CLICommand(ABC):
    """
    A named fleet operation reachable from the command line.

    Subclasses set name, description and aliases, declare their arguments
    in configure_parser() and implement run().
    """

    name: str = "command"
    description: str = ""
    aliases: Tuple[str, ...] = ()

    def __init__(self):
        self.parser = CommandParser(prog=self.name, description=self.description, add_help=False)
        self.configure_parser(self.parser)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Declare positional and optional arguments; none by default."""

    def parse(self, argv: List[str]) -> argparse.Namespace:
        """Raises UsageError when argv does not fit."""
        return self.parser.parse_args(argv)

    def usage(self) -> str:
        return self.parser.format_help().rstrip()

    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        try:
            return self.run(ctx, args)
        except DragonError as e:
            logger.debug(f"{self.name} failed: [{e.code}] {e.message}")
            return CommandResult.from_error(e)

    @abstractmethod
    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Apply the command to the context's repository."""


class CommandRegistry:
    """Commands keyed by name, reachable by name or alias."""

    def __init__(self, commands: Iterable[CLICommand] = ()):
        self._commands: Dict[str, CLICommand] = {}
        self._lookup: Dict[str, CLICommand] = {}
        for command in commands:
            self.register(command)

    def register(self, command: CLICommand) -> None:
        self._commands[command.name] = command
        for key in (command.name, *command.aliases):
            self._lookup[key] = command

    def get(self, name: str) -> Optional[CLICommand]:
        return self._lookup.get(name)

    def __iter__(self) -> Iterator[CLICommand]:
        return iter(sorted(self._commands.values(), key=lambda c: c.name))

    def __len__(self) -> int:
        return len(self._commands)


def format_output(result: CommandResult, output_format: OutputFormat = OutputFormat.TEXT) -> str:
    """
    Render a result.

    TEXT prints the message followed by one indented line per data entry;
    a failure prints "Error: <message>". JSON prints the whole result.
    """
    if output_format is OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, default=str)

    if not result.success:
        return f"Error: {result.error}"

    lines = [result.message] if result.message else []
    if isinstance(result.data, dict):
        lines.extend(f"  {key}: {value}" for key, value in result.data.items())
    elif isinstance(result.data, list):
        lines.extend(f"  {item}" for item in result.data)
    return "\n".join(lines).rstrip("\n")
