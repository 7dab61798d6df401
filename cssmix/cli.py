"""`cssmix` command line.

Renders a single helper for a selector, or looks up z-index layers:

    cssmix ratio 16 9 --pseudo --selector .video
    cssmix z site-header --layers layers.toml
"""
from __future__ import annotations
from collections.abc import Callable
from functools import wraps
import logging
import sys
from typing import Any, TypeVar

import click
from conterm.pretty import Markup

from cssmix import __version__
from cssmix.config import load_layers
from cssmix.gradients import linear_gradient
from cssmix.layers import Layers, resolve_layer, z_index
from cssmix.media import BREAKPOINTS, breakpoint_query
from cssmix.shapes import DIRECTIONS, triangle
from cssmix.sheet import Stylesheet
from cssmix.style import Node, UnsupportedOption
from cssmix.units import rem, responsive_ratio

__all__ = ["cli", "main", "setup_logging", "MarkupFormatter"]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "%(name)s:%(lineno)d %(message)s"


class MarkupFormatter(logging.Formatter):
    """Prefix records with their level, colored by severity."""

    COLORS = {
        logging.DEBUG: "243",
        logging.INFO: "blue",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "red",
    }

    def __init__(self, fmt: str | None = None, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level = f"{record.levelname.lower()}:"
        if self.color and (color := self.COLORS.get(record.levelno)) is not None:
            level = Markup.parse(f"[{color}]{level}")
        return f"{level} {message}"


def setup_logging(verbose: int = 0, color: bool | None = None) -> None:
    """Route `cssmix` logs to stderr. `-v` shows debug output."""
    if color is None:
        color = sys.stderr.isatty()
    level = logging.DEBUG if verbose > 0 else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(MarkupFormatter(DEBUG_LOG_FORMAT if verbose > 0 else LOG_FORMAT, color))

    root = logging.getLogger("cssmix")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


F = TypeVar("F", bound=Callable[..., Any])

def unsupported_as_usage(func: F) -> F:
    """Report rejected options as click usage errors instead of tracebacks."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except UnsupportedOption as error:
            raise click.UsageError(str(error)) from error

    return wrapper  # type: ignore[return-value]


def _emit(ctx: click.Context, selector: str, nodes: list[Node]):
    sheet = Stylesheet(indent=ctx.obj["indent"])
    sheet.rule(selector, nodes)
    click.echo(sheet.render(), nl=False)


def _layers(path: str | None) -> Layers:
    try:
        return load_layers(path)
    except ValueError as error:
        raise click.BadParameter(str(error), param_hint="--layers") from error


selector_option = click.option(
    "-s", "--selector", default=".example", show_default=True, help="Selector to render the helper for."
)
layers_option = click.option(
    "--layers",
    "layers_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML file with a `layers = [...]` list.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", count=True, help="Show debug logging.")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(0, 8), help="Spaces per indent level.")
@click.option("--color/--no-color", default=None, help="Force colored diagnostics on or off.")
@click.version_option(__version__, prog_name="cssmix")
@click.pass_context
def cli(ctx: click.Context, verbose: int, indent: int, color: bool | None) -> None:
    """Generate cross-browser css from small style helpers."""
    setup_logging(verbose, color)
    ctx.ensure_object(dict)
    ctx.obj["indent"] = indent


@cli.command("z")
@click.argument("name")
@layers_option
@selector_option
@click.option("--css", is_flag=True, help="Print a rule instead of the bare number.")
@click.pass_context
def z_command(ctx: click.Context, name: str, layers_path: str | None, selector: str, css: bool) -> None:
    """Resolve the z-index of layer NAME."""
    layers = _layers(layers_path)
    value = resolve_layer(name, layers)
    if value is None:
        ctx.exit(1)
    if css:
        _emit(ctx, selector, z_index(name, layers))
    else:
        click.echo(value)


@cli.command("layers")
@layers_option
def layers_command(layers_path: str | None) -> None:
    """List every layer with its z-index, highest first."""
    layers = _layers(layers_path)
    width = max((len(name) for name in layers), default=0)
    for name in layers:
        click.echo(f"{name:<{width}}  {resolve_layer(name, layers)}")


@cli.command("rem")
@click.argument("size")
@click.option("-p", "--property", "property_", default="font-size", show_default=True)
@selector_option
@click.pass_context
@unsupported_as_usage
def rem_command(ctx: click.Context, size: str, property_: str, selector: str) -> None:
    """Pixel SIZE with its rem equivalent."""
    _emit(ctx, selector, rem(size, property_))


@cli.command("ratio")
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option("--pseudo", is_flag=True, help="Apply the padding to a ::before element.")
@selector_option
@click.pass_context
@unsupported_as_usage
def ratio_command(ctx: click.Context, x: float, y: float, pseudo: bool, selector: str) -> None:
    """Intrinsic X:Y ratio box."""
    _emit(ctx, selector, responsive_ratio(x, y, pseudo))


@cli.command("triangle")
@click.argument("color")
@click.argument("direction", type=click.Choice(DIRECTIONS))
@click.option("--size", default="6px", show_default=True)
@click.option("--position", default="absolute", show_default=True)
@click.option("--round", "round_", is_flag=True, help="Round the corners slightly.")
@selector_option
@click.pass_context
@unsupported_as_usage
def triangle_command(
    ctx: click.Context, color: str, direction: str, size: str, position: str, round_: bool, selector: str
) -> None:
    """CSS triangle pointing DIRECTION."""
    _emit(ctx, f"{selector}::after", triangle(color, direction, size, position, round_))  # type: ignore[arg-type]


@cli.command("gradient")
@click.argument("args", nargs=-1, required=True)
@selector_option
@click.pass_context
@unsupported_as_usage
def gradient_command(ctx: click.Context, args: tuple[str, ...], selector: str) -> None:
    """Linear gradient from an optional direction and color stops."""
    _emit(ctx, selector, linear_gradient(*args))


@cli.command("breakpoint")
@click.argument("token", type=click.Choice(list(BREAKPOINTS)))
@click.option("--legacy", is_flag=True, help="Use the legacy thresholds where xs and sm overlap at 767px.")
def breakpoint_command(token: str, legacy: bool) -> None:
    """Media query for a breakpoint class."""
    click.echo(f"@media {breakpoint_query(token, legacy)}")  # type: ignore[arg-type]


def main() -> None:
    cli(prog_name="cssmix")
