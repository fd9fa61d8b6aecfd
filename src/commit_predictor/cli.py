"""
Command line interface for the commit_predictor tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``commitpredict`` command. It dispatches to
one of the tool's modes (validate, scope suggestions, smart prediction,
interactive entry, or direct assembly from options) and renders the
result. The CLI never commits; it prints the message to copy.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import click

from commit_predictor import __version__
from commit_predictor.config.loader import ConfigError, load_config
from commit_predictor.message.commit_message_generator import (
    CommitMessageGenerator,
    CommitTypeError,
    SmartCommit,
)
from commit_predictor.prediction.engine import PredictionEngine
from commit_predictor.prediction.templates import TemplateLibrary

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). When logging is configured by
# the CLI, root handlers will be added and messages will propagate.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_INVALID_MESSAGE = 3
EXIT_CONFIG_ERROR = 5

MAX_SCOPE_LENGTH = 20
MAX_DESCRIPTION_LENGTH = 50


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def print_message_box(title: str, message: str):
    """Print a commit message between horizontal rules."""
    click.echo("\n" + click.style(title, fg="green"))
    click.echo(click.style("─" * 60, fg="cyan"))
    click.echo(message)
    click.echo(click.style("─" * 60, fg="cyan"))


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------

def build_generator(config: dict, seed: Optional[int]) -> CommitMessageGenerator:
    """Wire the prediction engine and message generator from configuration."""
    templates = TemplateLibrary(random.Random(seed))
    engine = PredictionEngine(
        cwd=Path.cwd(),
        templates=templates,
        recent_window_minutes=config["recent_window_minutes"],
        max_recent_files=config["max_recent_files"],
    )
    return CommitMessageGenerator(engine, max_subject_length=config["max_subject_length"])


def validate_mode(generator: CommitMessageGenerator, message: str) -> int:
    result = generator.validate_commit_message(message)
    if result.is_valid:
        print_success("Valid commit message")
        return EXIT_SUCCESS
    print_error("Invalid commit message:")
    for error in result.errors:
        click.echo(f"  - {error}", err=True)
    return EXIT_INVALID_MESSAGE


def suggest_scope_mode(generator: CommitMessageGenerator, text: str) -> int:
    click.echo(click.style("Scope suggestions:", fg="blue"))
    for scope in generator.suggest_scopes(text):
        click.echo(f"  - {scope}")
    return EXIT_SUCCESS


def _validate_scope(value: str) -> str:
    value = value.strip()
    if len(value) > MAX_SCOPE_LENGTH:
        raise click.BadParameter(f"Scope should be {MAX_SCOPE_LENGTH} characters or less")
    if "(" in value or ")" in value:
        raise click.BadParameter("Scope cannot contain parentheses")
    return value


def _validate_description(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("Description is required")
    if len(value) > MAX_DESCRIPTION_LENGTH:
        raise click.BadParameter(f"Description should be {MAX_DESCRIPTION_LENGTH} characters or less")
    return value


def interactive_mode(generator: CommitMessageGenerator) -> int:
    """Prompt for each part of the message and print the result."""
    click.echo("")
    for _, label in generator.commit_types():
        click.echo(f"   {label}")
    click.echo("")

    types = [value for value, _ in generator.commit_types()]
    commit_type = click.prompt(
        "   Select commit type",
        type=click.Choice(types, case_sensitive=False),
        show_choices=False,
    ).lower()
    scope = click.prompt(
        "   Enter scope (optional)",
        default="",
        show_default=False,
        value_proc=_validate_scope,
    )
    description = click.prompt("   Enter commit description", value_proc=_validate_description)
    is_breaking = click.confirm("   Is this a breaking change?", default=False)

    message = generator.generate_commit_message(commit_type, scope, description, is_breaking)
    display_result(message)
    return EXIT_SUCCESS


def render_smart_commit(result: SmartCommit):
    prediction = result.prediction
    print_info(f"Prediction confidence: {round(prediction.confidence * 100)}%")
    if prediction.language:
        print_info(f"Detected language: {prediction.language}")
    if prediction.framework:
        print_info(f"Detected framework: {prediction.framework}")

    print_message_box("Suggested commit message:", result.message)

    if result.alternatives:
        click.echo("\n" + click.style("Alternative suggestions:", fg="yellow"))
        scope = f"({prediction.scope})" if prediction.scope else ""
        for idx, alt in enumerate(result.alternatives, 1):
            click.echo(f"{idx}. {alt.type.value}{scope}: {alt.description}")
            click.echo(f"   {alt.reason}")


def smart_mode(generator: CommitMessageGenerator) -> int:
    """Predict a message from the current changes and offer it."""
    print_info("Smart mode: analyzing your changes...")
    result = generator.generate_smart_commit()
    if result is None:
        print_warning("Could not predict changes, falling back to interactive mode...")
        return interactive_mode(generator)

    render_smart_commit(result)

    click.echo("")
    if click.confirm("   Use this commit message?", default=True):
        print_success("Ready to commit!")
        subject = result.message.split("\n")[0]
        click.echo(click.style(f'Run: git commit -m "{subject}"', dim=True))
        return EXIT_SUCCESS
    return interactive_mode(generator)


def display_result(message: str):
    print_message_box("Generated commit message:", message)
    click.echo(click.style("\nTip: Use your terminal to copy this message to clipboard", dim=True))


@click.command()
@click.option("-t", "--type", "commit_type", help="Commit type (feat, fix, docs, etc.).")
@click.option("-s", "--scope", help="Commit scope.")
@click.option("-d", "--description", help="Commit description.")
@click.option("-b", "--breaking", is_flag=True, help="Indicate a breaking change.")
@click.option("-i", "--interactive", is_flag=True, help="Use interactive mode.")
@click.option("-S", "--smart", is_flag=True, help="Use smart prediction based on git changes.")
@click.option("--validate", "message_to_validate", metavar="MESSAGE", help="Validate a commit message.")
@click.option("--suggest-scope", metavar="TEXT", help="Get scope suggestions based on input.")
@click.option("--seed", type=int, help="Seed for description selection (reproducible output).")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="commitpredict")
def main(
    commit_type: Optional[str],
    scope: Optional[str],
    description: Optional[str],
    breaking: bool,
    interactive: bool,
    smart: bool,
    message_to_validate: Optional[str],
    suggest_scope: Optional[str],
    seed: Optional[int],
    verbose: bool,
) -> None:
    """Predict Conventional Commit messages from your staged changes.

    Without options the tool runs in smart mode: it inspects the staged
    diff, guesses the type, scope and description, and prints a message
    ready to copy.
    """
    # Use force=True to ensure handlers are reconfigured on subsequent
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    ctx = click.get_current_context(silent=True)

    try:
        try:
            config = load_config()
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        generator = build_generator(config, seed)

        if message_to_validate is not None:
            raise click.exceptions.Exit(validate_mode(generator, message_to_validate))

        if suggest_scope is not None:
            raise click.exceptions.Exit(suggest_scope_mode(generator, suggest_scope))

        if smart or (not commit_type and not interactive):
            raise click.exceptions.Exit(smart_mode(generator))

        if interactive:
            raise click.exceptions.Exit(interactive_mode(generator))

        try:
            message = generator.generate_commit_message(commit_type or "chore", scope, description, breaking)
        except CommitTypeError as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_INVALID_USAGE)
        display_result(message)
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except (click.exceptions.Abort, click.exceptions.ClickException):
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
