"""Command: validate the field groups of a pass.json file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from passfields.commands._base import PassFieldsCommand

if TYPE_CHECKING:
    from passfields.commands._context import AppContext


@click.command(
    cls=PassFieldsCommand,
    examples="""\
  passfields check pass.json
  passfields check pass.json --strict
  passfields --json check pass.json
  passfields -c ./passfields.toml check pass.json""",
)
@click.argument("pass_json", type=click.Path(path_type=Path))
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if any field is rejected (also enabled by [check] fail_on_rejected).",
)
@click.pass_obj
def check(app: AppContext, pass_json: Path, strict: bool) -> None:
    """Load PASS_JSON through validated field groups and report rejections."""
    from passfields.services.check import CheckService

    settings = app.settings_for(pass_json)
    app.emit(CheckService(settings).check(pass_json, strict=True if strict else None))
