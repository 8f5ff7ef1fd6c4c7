"""
SecurePass CLI
===============

Click-based command-line interface for SecurePass. Provides subcommands
for password generation, strength evaluation, distribution audits of the
random draw and listing generation templates.

Usage::

    python -m securepass generate --length 20 --exclude-similar
    python -m securepass generate --template high-security --count 5
    python -m securepass evaluate "MyP@ssw0rd!"
    echo "MyP@ssw0rd!" | python -m securepass evaluate -
    python -m securepass audit --no-symbols --samples 50000
    python -m securepass -o json templates --context banking

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import functools
import json
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

import click

from shared.config import SecurePassConfig
from shared.console import SecurePassConsole
from shared.logger import SecurePassLogger

from securepass import __version__
from securepass.core.engine import SecurePassEngine
from securepass.core.errors import SecurePassError
from securepass.core.models import GenerationOptions, PasswordTemplate
from securepass.generators.charset import alphabet_for
from securepass.output.console import SecurePassConsoleOutput
from securepass.output.formatter import display_text, unformat_readable
from securepass.templates import TEMPLATES, get_template, recommended_templates


# ===================================================================== #
#  Helpers
# ===================================================================== #

@contextmanager
def _core_errors() -> Iterator[None]:
    """Report core failures as usage errors (exit code 2)."""
    try:
        yield
    except SecurePassError as exc:
        raise click.UsageError(str(exc)) from exc


def _emit_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _generation_flags(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the option flags shared by ``generate`` and ``audit``."""
    flags = [
        click.option("--length", "-l", type=int, default=None,
                     help="Password length (4-128)."),
        click.option("--uppercase/--no-uppercase", default=None,
                     help="Include A-Z."),
        click.option("--lowercase/--no-lowercase", default=None,
                     help="Include a-z."),
        click.option("--numbers/--no-numbers", default=None,
                     help="Include 0-9."),
        click.option("--symbols/--no-symbols", default=None,
                     help="Include symbols."),
        click.option("--exclude-similar", is_flag=True, default=False,
                     help="Remove look-alike characters (0 O 1 l I |)."),
        click.option("--exclude", "exclude_characters", default=None,
                     help="Additional characters to remove from the alphabet."),
        click.option("--no-repeat", is_flag=True, default=False,
                     help="Forbid identical adjacent characters."),
        click.option("--require-each", is_flag=True, default=False,
                     help="Every selected class appears at least once."),
        click.option("--template", "-t", "template_key", default=None,
                     help="Start from a named template (see 'templates')."),
    ]
    for flag in reversed(flags):
        func = flag(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = click.get_current_context()
        engine: SecurePassEngine = ctx.obj["engine"]
        template_key = kwargs.pop("template_key")
        overrides = {
            "length": kwargs.pop("length"),
            "include_uppercase": kwargs.pop("uppercase"),
            "include_lowercase": kwargs.pop("lowercase"),
            "include_numbers": kwargs.pop("numbers"),
            "include_symbols": kwargs.pop("symbols"),
            "exclude_characters": kwargs.pop("exclude_characters"),
            # single flags only ever switch a constraint on
            "exclude_similar": kwargs.pop("exclude_similar") or None,
            "prevent_repeating": kwargs.pop("no_repeat") or None,
            "require_each_class": kwargs.pop("require_each") or None,
        }
        with _core_errors():
            template = get_template(template_key) if template_key else None
            if template is None:
                options = engine.default_options(**overrides)
            else:
                values = template.options.model_dump()
                values.update({k: v for k, v in overrides.items() if v is not None})
                options = GenerationOptions(**values)
        return func(*args, options=options, template=template, **kwargs)

    return wrapper


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="securepass")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to SecurePass configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress rich output; print bare results only.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """SecurePass -- Secure Password Generator & Strength Estimator.

    Generate passwords from the operating system's secure random source,
    estimate the strength of any password, and audit the uniformity of
    character draws.
    """
    ctx.ensure_object(dict)

    securepass_config = SecurePassConfig.load(config) if config else SecurePassConfig()
    SecurePassLogger.configure_from(securepass_config)

    ctx.obj["config"] = securepass_config
    ctx.obj["output_format"] = output
    ctx.obj["quiet"] = quiet

    console = SecurePassConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = SecurePassEngine(securepass_config)
    ctx.obj["display"] = SecurePassConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@_generation_flags
@click.option(
    "--count", "-n",
    type=int,
    default=1,
    show_default=True,
    help="Number of passwords to generate (1-100).",
)
@click.option(
    "--readable/--plain",
    default=None,
    help="Group the displayed password in blocks of four.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    options: GenerationOptions,
    template: Optional[PasswordTemplate],
    count: int,
    readable: Optional[bool],
) -> None:
    """Generate one or more secure passwords.

    Characters are drawn uniformly from the selected classes using the
    operating system's cryptographically secure random source.
    """
    engine: SecurePassEngine = ctx.obj["engine"]
    display: SecurePassConsoleOutput = ctx.obj["display"]

    if readable is None:
        readable = template.readable_format if template is not None else False

    with _core_errors():
        reports = engine.generate_many(options, count)

    if ctx.obj["output_format"] == "json":
        _emit_json([
            {
                **report.model_dump(mode="json"),
                "display": display_text(report.password, readable),
            }
            for report in reports
        ])
    elif ctx.obj["quiet"]:
        for report in reports:
            click.echo(display_text(report.password, readable))
    elif len(reports) == 1:
        display.display_generation(reports[0], readable=readable)
    else:
        display.display_batch(reports, readable=readable)


@cli.command()
@click.argument("password")
@click.option(
    "--readable", is_flag=True, default=False,
    help="PASSWORD was copied in grouped form; drop the group spaces.",
)
@click.pass_context
def evaluate(ctx: click.Context, password: str, readable: bool) -> None:
    """Estimate the strength of PASSWORD ('-' reads it from stdin).

    Computes effective entropy, detects sequential, repeated and keyboard
    patterns, and maps the result to a 0-4 score.
    """
    engine: SecurePassEngine = ctx.obj["engine"]
    display: SecurePassConsoleOutput = ctx.obj["display"]

    if password == "-":
        password = click.get_text_stream("stdin").read().rstrip("\r\n")
    if readable:
        password = unformat_readable(password)

    result = engine.evaluate(password)

    if ctx.obj["output_format"] == "json":
        _emit_json(result.model_dump(mode="json"))
    elif ctx.obj["quiet"]:
        click.echo(f"{result.score} {result.label.value}")
    else:
        display.display_strength(result)


@cli.command()
@_generation_flags
@click.option(
    "--samples", "-s",
    type=int,
    default=None,
    help="Number of draws (defaults to [audit] sample_size).",
)
@click.pass_context
def audit(
    ctx: click.Context,
    options: GenerationOptions,
    template: Optional[PasswordTemplate],
    samples: Optional[int],
) -> None:
    """Audit the uniformity of character draws.

    Samples the generator's bounded draw over the alphabet selected by the
    generation flags and runs a chi-squared goodness-of-fit test.
    """
    engine: SecurePassEngine = ctx.obj["engine"]
    display: SecurePassConsoleOutput = ctx.obj["display"]
    console: SecurePassConsole = ctx.obj["console"]

    with _core_errors():
        if ctx.obj["output_format"] == "json":
            result = engine.audit(options, samples)
        else:
            with console.status("Sampling draws..."):
                result = engine.audit(options, samples)

    if ctx.obj["output_format"] == "json":
        _emit_json(result.model_dump(mode="json"))
    elif ctx.obj["quiet"]:
        click.echo(f"{'passed' if result.passed else 'failed'} p={result.p_value:.4g}")
    else:
        display.display_audit(result, alphabet_for(options))
        if result.passed:
            console.success("No character is drawn more often than chance allows.")
        else:
            console.warning("Character draws deviate from uniform; check the random source.")


@cli.command()
@click.option(
    "--context",
    default=None,
    help="Usage context, e.g. banking, social, device.",
)
@click.pass_context
def templates(ctx: click.Context, context: Optional[str]) -> None:
    """List generation templates, optionally for a usage context."""
    display: SecurePassConsoleOutput = ctx.obj["display"]
    picks = recommended_templates(context)

    if ctx.obj["output_format"] == "json":
        _emit_json([t.model_dump(mode="json") for t in picks])
    elif ctx.obj["quiet"]:
        for template in picks:
            click.echo(template.key)
    else:
        if context and len(picks) == len(TEMPLATES):
            ctx.obj["console"].info(f"No specific templates for {context!r}; listing all.")
        display.display_templates(picks)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the SecurePass CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
