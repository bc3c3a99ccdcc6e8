"""
cli/commands.py - Fleet commands

One CLICommand per repository operation plus read-only views. Commands
take names, never objects, and report the affected entities in their
"<name> - <status>" form.
"""

from __future__ import annotations
import argparse

from .core import CLICommand, CLIContext, CommandRegistry, CommandResult, OutputFormat
from dragonfleet.errors import MissionNotFoundError


def _rocket_and_mission(ctx: CLIContext, rocket_name: str) -> dict:
    """Rocket line, plus its mission line when assigned."""
    rocket = ctx.repository.get_rocket(rocket_name)
    data = {"rocket": str(rocket)}
    if rocket.assigned_mission is not None:
        data["mission"] = str(rocket.assigned_mission)
    return data


class AddRocketCommand(CLICommand):
    """Add rockets to the fleet."""

    name = "add-rocket"
    description = "Add rockets (ON_GROUND); a taken or repeated name adds none"
    aliases = ("rocket",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("names", nargs="+", help="Rocket names")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        added = ctx.repository.add_rockets(args.names)
        return CommandResult(
            message=f"Added rocket(s): {', '.join(added)}",
            data={"rockets": added},
        )


class AddMissionCommand(CLICommand):
    """Add missions."""

    name = "add-mission"
    description = "Add missions (SCHEDULED); a taken or repeated name adds none"
    aliases = ("mission",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("names", nargs="+", help="Mission names")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        added = ctx.repository.add_missions(args.names)
        return CommandResult(
            message=f"Added mission(s): {', '.join(added)}",
            data={"missions": added},
        )


class AssignCommand(CLICommand):
    """Assign rockets to a mission."""

    name = "assign"
    description = "Assign rockets to a mission (all or nothing)"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("mission", help="Mission name")
        parser.add_argument("rockets", nargs="+", help="Rocket names")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        repo = ctx.repository
        if len(args.rockets) == 1:
            repo.assign_rocket_to_mission(args.rockets[0], args.mission)
        else:
            repo.assign_rockets_to_mission(args.rockets, args.mission)

        mission = repo.get_mission(args.mission)
        return CommandResult(
            message=f"Assigned {', '.join(args.rockets)} to {args.mission}",
            data={"mission": str(mission)},
        )


class RemoveCommand(CLICommand):
    """Remove a rocket from a mission."""

    name = "remove"
    description = "Remove a rocket from a mission"
    aliases = ("unassign",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("mission", help="Mission name")
        parser.add_argument("rocket", help="Rocket name")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        repo = ctx.repository
        repo.remove_rocket_from_mission(args.rocket, args.mission)
        return CommandResult(
            message=f"Removed {args.rocket} from {args.mission}",
            data={
                "mission": str(repo.get_mission(args.mission)),
                "rocket": str(repo.get_rocket(args.rocket)),
            },
        )


class RepairCommand(CLICommand):
    """Put a rocket into repair."""

    name = "repair"
    description = "Put a rocket into repair"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("rocket", help="Rocket name")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        ctx.repository.put_rocket_into_repair(args.rocket)
        return CommandResult(
            message=f"{args.rocket} is in repair",
            data=_rocket_and_mission(ctx, args.rocket),
        )


class FixCommand(CLICommand):
    """Complete the repair of a rocket."""

    name = "fix"
    description = "Complete the repair of a rocket"
    aliases = ("complete-repair",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("rocket", help="Rocket name")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        ctx.repository.complete_repair_of_rocket(args.rocket)
        return CommandResult(
            message=f"{args.rocket} repaired",
            data=_rocket_and_mission(ctx, args.rocket),
        )


class EndCommand(CLICommand):
    """End a mission."""

    name = "end"
    description = "End an IN_PROGRESS mission, detaching its rockets"
    aliases = ("complete",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("mission", help="Mission name")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        ctx.repository.end_mission(args.mission)
        return CommandResult(
            message=f"Mission {args.mission} ended",
            data={"mission": str(ctx.repository.get_mission(args.mission))},
        )


class SummaryCommand(CLICommand):
    """Show missions and their rockets."""

    name = "summary"
    description = "Show missions and their rockets"
    aliases = ("ls",)

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        repo = ctx.repository
        if ctx.output_format == OutputFormat.JSON:
            return CommandResult(data=repo.snapshot().model_dump(mode="json"))
        summary = repo.get_summary()
        return CommandResult(message=summary or "No missions")


class ShowCommand(CLICommand):
    """Show a single rocket or mission."""

    name = "show"
    description = "Show a rocket or mission by name"
    aliases = ("get",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("name", help="Rocket or mission name")
        parser.add_argument(
            "--kind", "-k",
            choices=["rocket", "mission"],
            default=None,
            help="Entity kind (missions are looked up first)",
        )

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        repo = ctx.repository

        if args.kind != "rocket":
            try:
                mission = repo.get_mission(args.name)
            except MissionNotFoundError:
                if args.kind == "mission":
                    raise
            else:
                return CommandResult(
                    message=str(mission),
                    data={"rockets": sorted(mission.rocket_names)},
                )

        rocket = repo.get_rocket(args.name)
        return CommandResult(
            message=str(rocket),
            data={"mission": rocket.mission_name},
        )


class HistoryCommand(CLICommand):
    """Show recorded status transitions."""

    name = "history"
    description = "Show status transitions, optionally for one rocket or mission"
    aliases = ("log",)

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("name", nargs="?", default=None, help="Entity name")
        parser.add_argument("--limit", "-n", type=int, default=20, help="Max events shown")

    def run(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        events = ctx.repository.history(args.name)
        if args.limit > 0:
            events = events[-args.limit:]

        if ctx.output_format == OutputFormat.JSON:
            return CommandResult(data=[e.to_dict() for e in events])
        return CommandResult(
            message=f"{len(events)} transition(s)",
            data=[str(e) for e in events],
        )


DEFAULT_COMMANDS = (
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
)


def build_registry() -> CommandRegistry:
    """Registry holding a fresh instance of every fleet command."""
    return CommandRegistry(command() for command in DEFAULT_COMMANDS)
