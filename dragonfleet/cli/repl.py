"""
cli/repl.py - Interactive prompt, script runner and entry point

`dragonfleet` with no arguments opens a prompt; `-c LINE` runs one command
and `-s FILE` runs a script, both exiting with the first failure's code.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import argparse
import logging
import shlex
import sys

from .core import (
    CLIContext,
    CommandRegistry,
    CommandResult,
    OutputFormat,
    UsageError,
    format_output,
)
from .commands import build_registry
from dragonfleet.bootstrap.config import configure_logging, load_config
from dragonfleet.repository import DragonRepository

logger = logging.getLogger("cli.repl")

BANNER = "Dragon fleet CLI. Type 'help' for commands, 'quit' to leave."
QUIT_WORDS = frozenset({"quit", "exit", "q"})


class REPL:
    """
    Runs command lines against one CLIContext.

    Lines are split with shlex, so names with spaces are quoted:
        assign Starlink-1 "Falcon 9" "Falcon Heavy"
    """

    def __init__(
        self,
        ctx: Optional[CLIContext] = None,
        registry: Optional[CommandRegistry] = None,
    ):
        self.ctx = ctx or CLIContext()
        self.registry = registry if registry is not None else build_registry()

    def execute_line(self, line: str) -> CommandResult:
        try:
            words = shlex.split(line)
        except ValueError as e:
            return CommandResult.failure(f"Parse error: {e}")
        if not words:
            return CommandResult()

        command = self.registry.get(words[0])
        if command is None:
            return CommandResult.failure(
                f"Unknown command: {words[0]}. Type 'help' for available commands."
            )

        try:
            args = command.parse(words[1:])
        except UsageError as e:
            return CommandResult.failure(str(e))

        return command.execute(self.ctx, args)

    def execute_batch(self, lines: Iterable[str]) -> List[CommandResult]:
        """
        Run lines in order, stopping after the first failure.

        Blank lines and '#' comments are skipped and produce no result.
        """
        results: List[CommandResult] = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            results.append(self.execute_line(line))
            if not results[-1].success:
                break
        return results

    def execute_file(self, filepath: str) -> List[CommandResult]:
        with open(filepath) as f:
            return self.execute_batch(f)

    def render(self, line: str) -> str:
        """
        Run a line for display at the prompt.

        A failure that is not a domain error is logged (with traceback when
        the context is verbose) and shown as an error line, so the prompt
        keeps going.
        """
        try:
            result = self.execute_line(line)
        except Exception as e:
            logger.error(f"Unexpected failure running {line!r}: {e}", exc_info=self.ctx.verbose)
            result = CommandResult.failure(str(e), exit_code=2)
        return format_output(result, self.ctx.output_format)

    def help_text(self, topic: Optional[str] = None) -> str:
        """Command overview, or the usage of one command."""
        if topic:
            command = self.registry.get(topic)
            if command is None:
                return f"Unknown command: {topic}"
            return command.usage()

        lines = ["Commands:"]
        for command in self.registry:
            aliases = f" ({', '.join(command.aliases)})" if command.aliases else ""
            lines.append(f"  {command.name}{aliases}: {command.description}")
        lines.append("  help [command], quit")
        return "\n".join(lines)

    def run(self, prompt: str = "dragon> ") -> None:
        print(BANNER)
        while True:
            try:
                line = input(prompt).strip()
            except (EOFError, KeyboardInterrupt):
                print()
                return

            word, _, rest = line.partition(" ")
            if not word:
                continue
            if word.lower() in QUIT_WORDS:
                return
            if word.lower() == "help":
                print(self.help_text(rest.strip() or None))
            else:
                print(self.render(line))


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point; returns the process exit code."""
    parser = argparse.ArgumentParser(prog="dragonfleet", description="Rocket and mission fleet CLI")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--command", "-c", metavar="LINE", help="Run a single command line")
    source.add_argument("--script", "-s", metavar="FILE", help="Run a command script")
    parser.add_argument("--config", metavar="FILE", help="JSON config file")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging and tracebacks for unexpected failures",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    verbose = args.verbose or config.debug
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config.logging)

    repl = REPL(CLIContext(
        repository=DragonRepository(config.fleet),
        output_format=OutputFormat.JSON if args.json else OutputFormat.TEXT,
        verbose=verbose,
    ))

    if args.command is not None:
        results = [repl.execute_line(args.command)]
    elif args.script:
        results = repl.execute_file(args.script)
    else:
        repl.run()
        return 0

    for result in results:
        print(format_output(result, repl.ctx.output_format))
    return next((r.exit_code for r in results if not r.success), 0)


if __name__ == "__main__":
    sys.exit(main())
