"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from cssbuilder import __version__
from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.facade import Renderable, combine
from cssbuilder.model.fragment import FragmentKind

# Command-line spelling of each fragment kind
KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=CssBuilderConfig.log_level,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """cssbuilder - compose CSS selectors from typed fragments."""
    config = CssBuilderConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: CssBuilderConfig, tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE tokens and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    A "+", "~" or ">" token starts the next selector; "_" stands for the
    descendant (space) combinator.

    Example: cssbuilder build element=table id=data "~" element=tr
    """
    try:
        selector = _build_from_tokens(config, tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@cli.command()
def kinds() -> None:
    """List fragment kinds in the order they must appear."""
    for name, kind in KIND_NAMES.items():
        prefix = kind.render("")
        singleton = "once" if kind.is_singleton else "repeatable"
        click.echo(f"{kind.rank}  {name:<15} {prefix or '-':<4} {singleton}")


def _build_from_tokens(
    config: CssBuilderConfig, tokens: tuple[str, ...]
) -> Renderable:
    result: Renderable | None = None
    pending: str | None = None
    current = SelectorBuilder()

    for token in tokens:
        combinator = config.combinator_for(token)
        if combinator is not None:
            if not current.applied_kinds:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector", param_hint="TOKENS"
                )
            result = current if result is None else combine(result, pending, current)
            pending = combinator
            current = SelectorBuilder()
            continue

        name, sep, value = token.partition("=")
        if not sep or name not in KIND_NAMES:
            raise click.BadParameter(
                f"expected KIND=VALUE or a combinator, got {token!r}",
                param_hint="TOKENS",
            )
        current.append(KIND_NAMES[name], value)

    if not current.applied_kinds:
        raise click.BadParameter("selector cannot end with a combinator", param_hint="TOKENS")
    if result is None:
        return current
    return combine(result, pending, current)
