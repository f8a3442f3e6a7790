"""``agentskills`` command line: register the skills MCP bridge and skill dependencies."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt
from rich.table import Table

from .agents import (
    AGENT_FAMILIES,
    detect_installed_agents,
    display_name,
    get_family,
)
from .config import make_config_manager
from .dependencies import build_allowed_tools_by_server, check_dependencies, collect_dependencies
from .errors import AgentSkillsError, SetupCancelledError
from .generators import build_config_generator_registry, build_server_file_registry
from .loaders import load_installed_skills
from .models.bundle import ConfigMode, Scope
from .setup import SetupSummary, configure_skill_mcp_deps_for_agents, run_setup
from .validation import validate_mcp_dependencies

console = Console()
logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class RichPrompter:
    """Prompts on the terminal; Ctrl-C or end of input cancels the setup."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def ask(
        self,
        message: str,
        *,
        description: str = "",
        sensitive: bool = False,
        default: str | None = None,
        example: str | None = None,
    ) -> str:
        if description:
            self._console.print(f"[dim]{description}[/dim]")
        if example:
            self._console.print(f"[dim]Example: {example}[/dim]")
        try:
            while True:
                if default is not None:
                    answer = Prompt.ask(
                        message, password=sensitive, default=default, console=self._console
                    )
                else:
                    answer = Prompt.ask(message, password=sensitive, console=self._console)
                if answer:
                    return answer
                self._console.print("[red]A value is required.[/red]")
        except (KeyboardInterrupt, EOFError) as e:
            raise SetupCancelledError() from e


def _scope(is_global: bool) -> Scope:
    return "global" if is_global else "local"


def _base_dir(cwd: Path | None) -> Path:
    return cwd or Path.cwd()


cwd_option = click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="AGENTSKILLS_PROJECT_DIR",
    help="Project directory (defaults to the current directory).",
)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="AGENTSKILLS_LOG_LEVEL",
    show_default=True,
    help="Log verbosity.",
)
def cli(log_level: str) -> None:
    """Install agent skills support into coding agents."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@cli.group()
def mcp() -> None:
    """Manage MCP server registrations for coding agents."""


@mcp.command()
@click.option(
    "--agent",
    "agents",
    multiple=True,
    help="Agent to configure (repeatable). '*' selects every detected agent.",
)
@click.option(
    "--agent-config",
    "config_mode",
    flag_value="agent-config",
    default=None,
    help="Write the rich agent file for agents that support one.",
)
@click.option(
    "--mcp-json",
    "config_mode",
    flag_value="mcp-json",
    help="Write only the plain MCP server registration.",
)
@click.option("--global", "is_global", is_flag=True, help="Configure in the home directory.")
@cwd_option
def setup(
    agents: tuple[str, ...],
    config_mode: ConfigMode | None,
    is_global: bool,
    cwd: Path | None,
) -> None:
    """Register the agentskills server (and skill MCP dependencies) with agents.

    Without --agent, asks for scope, agents and config mode interactively.
    """
    base_dir = _base_dir(cwd)
    scope = _scope(is_global)
    try:
        if agents:
            selected = _expand_agents(agents)
        else:
            scope, selected, config_mode = _interactive_choices()
        if not selected:
            console.print("[yellow]No agents selected.[/yellow]")
            sys.exit(1)
        summary = run_setup(
            selected, base_dir, scope, config_mode, prompter=RichPrompter(console)
        )
    except SetupCancelledError as e:
        console.print(f"[yellow]{e}[/yellow]")
        sys.exit(1)

    _print_summary(summary)
    if not summary.any_configured:
        sys.exit(1)


def _expand_agents(agents: tuple[str, ...]) -> list[str]:
    if "*" not in agents:
        return list(dict.fromkeys(agents))
    detected = detect_installed_agents()
    if not detected:
        console.print("[yellow]No supported coding agents detected.[/yellow]")
    return detected


def _interactive_choices() -> tuple[Scope, list[str], ConfigMode | None]:
    try:
        scope = Prompt.ask(
            "Install scope", choices=["local", "global"], default="local", console=console
        )
        detected = detect_installed_agents()
        console.print("\n[bold]Supported agents:[/bold]")
        for family in AGENT_FAMILIES:
            mark = " [green](detected)[/green]" if family.name in detected else ""
            console.print(f"  - {family.name:<16} {family.display_name}{mark}")
        answer = Prompt.ask(
            "Agents to configure (comma-separated)",
            default=",".join(detected) if detected else None,
            console=console,
        )
        selected = [a.strip() for a in (answer or "").split(",") if a.strip()]
        config_mode: ConfigMode | None = None
        registry = build_config_generator_registry()
        if any(registry.supports(a) for a in selected):
            config_mode = Prompt.ask(
                "Config mode for agents with agent files",
                choices=["agent-config", "mcp-json"],
                default="agent-config",
                console=console,
            )
    except (KeyboardInterrupt, EOFError) as e:
        raise SetupCancelledError() from e
    return scope, selected, config_mode


def _print_summary(summary: SetupSummary) -> None:
    for agent, paths in summary.configured.items():
        console.print(f"[green]✓[/green] {display_name(agent)} configured")
        for path in paths:
            console.print(f"    [dim]{path}[/dim]")
        for server in summary.dependencies.added.get(agent, []):
            console.print(f"    [green]+[/green] {server}")
        regenerated = summary.dependencies.regenerated.get(agent)
        if regenerated:
            console.print(f"    [dim]agent file servers: {', '.join(regenerated)}[/dim]")
        family = get_family(agent)
        if family and family.activation_hint:
            console.print(f"    [cyan]{family.activation_hint}[/cyan]")
    for agent, error in summary.failed.items():
        console.print(f"[red]✗ {display_name(agent)} failed: {error}[/red]")


@mcp.command()
@click.option("--agent", required=True, help="Agent whose config is checked.")
@click.option("--global", "is_global", is_flag=True, help="Check the home-directory config.")
@click.option("--with-mcp", is_flag=True, help="Configure missing servers instead of failing.")
@cwd_option
def check(agent: str, is_global: bool, with_mcp: bool, cwd: Path | None) -> None:
    """Check that the MCP servers required by installed skills are configured."""
    base_dir = _base_dir(cwd)
    scope = _scope(is_global)
    skills = load_installed_skills(base_dir, scope)

    validation = validate_mcp_dependencies(skills)
    for issue in validation.warnings:
        console.print(f"[yellow]! {issue.message}[/yellow]")
    for issue in validation.errors:
        console.print(f"[red]✗ {issue.path}: {issue.message}[/red]")

    deps = collect_dependencies(skills)
    try:
        result = check_dependencies(agent, deps, make_config_manager(base_dir, scope))
    except AgentSkillsError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if result.all_configured:
        console.print(
            f"[green]✓[/green] All {len(deps)} required MCP servers are configured "
            f"for {display_name(agent)}"
        )
        return

    console.print(f"[bold]Missing MCP servers for {display_name(agent)}:[/bold]")
    for dep in result.missing:
        console.print(f"  - {dep.server_name} [dim](needed by: {', '.join(dep.needed_by)})[/dim]")

    if not with_mcp:
        console.print("\nRun again with [bold]--with-mcp[/bold] to configure them.")
        sys.exit(1)

    try:
        summary = configure_skill_mcp_deps_for_agents(
            result.missing,
            [agent],
            base_dir,
            scope,
            "mcp-json",
            build_allowed_tools_by_server(skills),
            prompter=RichPrompter(console),
        )
    except SetupCancelledError as e:
        console.print(f"[yellow]{e}[/yellow]")
        sys.exit(1)

    for server in summary.added.get(agent, []):
        console.print(f"[green]+[/green] {server}")
    if summary.failed:
        console.print(f"[red]✗ {summary.failed[agent]}[/red]")
        sys.exit(1)


@mcp.command()
@click.argument("server")
@click.option("--agent", required=True, help="Agent to remove the server from.")
@click.option("--global", "is_global", is_flag=True, help="Edit the home-directory config.")
@cwd_option
def remove(server: str, agent: str, is_global: bool, cwd: Path | None) -> None:
    """Remove one MCP server from an agent's config."""
    manager = make_config_manager(_base_dir(cwd), _scope(is_global))
    try:
        manager.remove_server(agent, server)
    except AgentSkillsError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    console.print(f"[green]✓[/green] Removed {server} from {display_name(agent)}")


@mcp.command()
def generators() -> None:
    """List the agent-file generators and the agents they support."""
    table = Table("Generator", "Agents", "Docs")
    for registry in (build_config_generator_registry(), build_server_file_registry()):
        for meta in registry.list_generators():
            table.add_row(meta.name, ", ".join(meta.agent_types), meta.docs_url or "")
    console.print(table)


def main() -> None:
    cli()
