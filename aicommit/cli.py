#!/usr/bin/env python3
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

import click
import pyperclip
from rich.console import Console

from . import __version__
from .client import CompletionClient
from .config import ConfigStore
from .core import ClientFactory, CommitWorkflow, GitCommitter
from .exceptions import AICommitError, UnknownCommand
from .observers import ConsoleLogObserver, FileLogObserver
from .prompter import ConsolePrompter, Prompter
from .prompts import DEFAULT_MODEL
from .repository import Repository

MODEL_ENV = "AI_COMMIT_MODEL"
LOG_FILE_ENV = "AI_COMMIT_LOG_FILE"

console = Console()


@dataclass
class AppContext:
    """Collaborators shared by every subcommand, built once per process."""

    config_store: ConfigStore
    repository: Repository
    prompter: Prompter
    console: Console = field(default_factory=lambda: console)
    client_factory: ClientFactory = CompletionClient.from_config

    @classmethod
    def create(cls, path: Path) -> "AppContext":
        return cls(
            config_store=ConfigStore.default(),
            repository=Repository.at(path),
            prompter=ConsolePrompter(console),
            console=console,
        )


def print_error(out: Console, message: str) -> None:
    out.print(f"Error: {message}", style="red", markup=False, highlight=False)


@contextmanager
def reported_errors(out: Console) -> Iterator[None]:
    """Report failures to the user and exit non-zero."""
    try:
        yield
    except KeyboardInterrupt:
        out.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except AICommitError as e:
        print_error(out, str(e))
        sys.exit(1)
    except Exception as e:
        print_error(out, str(e))
        raise click.Abort()


class CommandGroup(click.Group):
    """Group that reports unknown subcommands like any other error."""

    def resolve_command(self, ctx: click.Context, args):
        cmd_name = click.utils.make_str(args[0])
        if not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            out = ctx.obj.console if isinstance(ctx.obj, AppContext) else console
            print_error(out, str(UnknownCommand(cmd_name)))
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(cls=CommandGroup, invoke_without_command=True)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.version_option(__version__, prog_name="ai-commit")
@click.pass_context
def main(ctx: click.Context, path: Path):
    """
    Generate a commit message for your staged changes with AI.

    Runs `generate` when no command is given. The API key and an optional
    custom prompt are stored in ~/.ai-commit; see `setConfig`.
    """
    if ctx.obj is None:
        ctx.obj = AppContext.create(path.absolute())
    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@main.command()
@click.option(
    "-m",
    "--model",
    default=None,
    help=f"Model to use (default: ${MODEL_ENV} or {DEFAULT_MODEL})",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Optional file to log git operations (default: ${LOG_FILE_ENV})",
)
@click.option(
    "-d", "--dry-run", is_flag=True, help="Show the generated message without committing"
)
@click.option(
    "--no-verify",
    is_flag=True,
    help="Skip pre-commit hooks when creating the commit",
)
@click.pass_obj
def generate(
    app: AppContext,
    model: Optional[str],
    log_file: Optional[Path],
    dry_run: bool,
    no_verify: bool,
):
    """Generate a commit message for the staged diff and commit it."""
    with reported_errors(app.console):
        committer = GitCommitter(app.repository, no_verify=no_verify)
        committer.add_observer(ConsoleLogObserver(app.console))

        log_file_path = log_file or os.environ.get(LOG_FILE_ENV)
        if log_file_path:
            committer.add_observer(FileLogObserver(log_file_path))

        workflow = CommitWorkflow(
            app.repository,
            app.config_store,
            app.prompter,
            committer=committer,
            console=app.console,
            model=model or os.environ.get(MODEL_ENV) or DEFAULT_MODEL,
            client_factory=app.client_factory,
            dry_run=dry_run,
        )
        workflow.run()


@main.command("setConfig")
@click.option("--key", required=True, help="Config key: API_KEY or COMMIT_PROMPT")
@click.option("--value", required=True, help="Config value")
@click.pass_obj
def set_config(app: AppContext, key: str, value: str):
    """Store a configuration value."""
    with reported_errors(app.console):
        app.config_store.set(key, value)
        app.console.print(
            f"Configuration updated: {key}={value}", markup=False, highlight=False
        )


@main.command("getConfig")
@click.option("--key", required=True, help="Config key: API_KEY or COMMIT_PROMPT")
@click.pass_obj
def get_config(app: AppContext, key: str):
    """Print a configuration value."""
    with reported_errors(app.console):
        value = app.config_store.get(key)
        app.console.print(f"{key}={value}", markup=False, highlight=False, soft_wrap=True)


@main.command("getConfigPath")
@click.option("--copy", is_flag=True, help="Copy the path to the clipboard")
@click.pass_obj
def get_config_path(app: AppContext, copy: bool):
    """Print the location of the configuration file."""
    config_path = str(app.config_store.path)
    app.console.print(
        f"Configuration file path: {config_path}", markup=False, highlight=False, soft_wrap=True
    )
    if copy:
        try:
            pyperclip.copy(config_path)
        except pyperclip.PyperclipException as e:
            app.console.print(f"[yellow]Could not copy to clipboard: {e}[/yellow]")
        else:
            app.console.print("[green]Path copied to clipboard![/green]")


if __name__ == "__main__":
    main()
