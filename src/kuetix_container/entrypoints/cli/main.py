"""kuetix-container CLI entry point.

Defines the top-level ``kuetix-container`` command (via Click-Extra) and its
subcommands.

Currently available commands
- ``kuetix-container inspect`` - bootstrap a container, apply boot targets,
  drain the bootstrap gate and list every registered key.

Examples
    $ kuetix-container --version
    $ kuetix-container inspect --param env=dev --boot myapp.wiring:wire
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table
from rich.text import Text

from kuetix_container import __version__
from kuetix_container.bootstrap import boot, bootstrap
from kuetix_container.logging import (
    config_console_handler,
    log_startup,
    mark_first_party,
)

from .helpers import load_boot_target, parse_log_level, parse_parameters

if TYPE_CHECKING:
    from logging import Handler

    from kuetix_container.bootstrap import AppContainer

logger = logging.getLogger(__name__)


HELP = """kuetix-container command-line interface.

    Developer tooling for the kuetix-container service registry: build a
    container the way an application would at startup and report what ends up
    registered in it.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L kuetix_container.registry=DEBUG -L myapp=WARNING)."
    ),
    default=(),
    show_envvar=True,
)
@clickx.pass_context
def kuetix_container(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """kuetix-container command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )


def render_container(container: "AppContainer") -> Table:
    """Build a Rich table with one ``store | key`` row per registered entry."""
    table = Table(title="Registered keys")
    table.add_column("Store", style="cyan", no_wrap=True)
    table.add_column("Key", style="bold", no_wrap=True)
    for store, key in container.registry.snapshot().rows():
        table.add_row(store.value, Text(key))
    return table


@kuetix_container.command()
@click.option(
    "--param",
    "-p",
    "parameters",
    multiple=True,
    callback=parse_parameters,
    metavar="KEY=VALUE",
    help="Seed a registry parameter. Repeatable; later values win.",
)
@click.option(
    "--env/--no-env",
    "load_env",
    default=True,
    show_default=True,
    help="Read KUETIX_PARAM_* environment variables as parameters.",
)
@click.option(
    "--boot",
    "-b",
    "boot_targets",
    multiple=True,
    metavar="MODULE:ATTR",
    help="Callable receiving the container, used to register services. Repeatable.",
)
@click.option(
    "--run/--no-run",
    "run_callbacks",
    default=True,
    show_default=True,
    help="Run the registered bootstrap callbacks before listing keys.",
)
def inspect(
    parameters: dict[str, str],
    load_env: bool,
    boot_targets: tuple[str, ...],
    run_callbacks: bool,
) -> None:
    """Bootstrap a container and list what it registers."""

    targets = [load_boot_target(spec) for spec in boot_targets]
    # The application being wired is first-party for this run.
    mark_first_party(*{spec.partition(":")[0].split(".")[0] for spec in boot_targets})

    container = bootstrap(parameters, load_env=load_env)
    for spec, target in zip(boot_targets, targets):
        logger.info("Applying boot target %s", spec)
        target(container)

    if run_callbacks:
        boot(container)
    callback_names = sorted(container.gate.callbacks)

    console = Console()
    console.print(render_container(container))
    status = "ran" if run_callbacks else "not run"
    console.print(
        f"Bootstrap callbacks ({status}): "
        + (", ".join(callback_names) if callback_names else "<none>"),
        markup=False,
    )
