"""Click callback turning repeated ``--param KEY=VALUE`` options into a dict."""

import click

from kuetix_container.config import InvalidAssignmentError, parse_assignment


def parse_parameters(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    """Parse KEY=VALUE items; later items override earlier ones.

    Raises:
        click.BadParameter: If an item has no ``=`` or an empty key.
    """
    parameters: dict[str, str] = {}
    for item in value:
        try:
            key, val = parse_assignment(item)
        except InvalidAssignmentError as e:
            raise click.BadParameter(str(e)) from e
        parameters[key] = val
    return parameters
