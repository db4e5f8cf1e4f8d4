"""Helpers shared by the CLI commands: ``--json`` envelopes and error exits."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import click

from storefront.application.envelope import Envelope
from storefront.domain.exceptions import DomainException, ValidationError

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print a {success, message, data} JSON envelope."
)


def fail(exc: DomainException, as_json: bool) -> NoReturn:
    """Report a domain error and stop the command with exit code 1."""
    if as_json:
        click.echo(Envelope.from_error(exc).to_json())
        raise click.exceptions.Exit(1)
    raise click.ClickException(str(exc))


def emit(message: str, data: Any = None, created: bool = False) -> None:
    click.echo(Envelope.ok(message, data, created=created).to_json())


def parse_json_objects(values: tuple[str, ...], what: str) -> list[dict[str, Any]]:
    """Decode each ``--option '{...}'`` value into a dict."""
    parsed = []
    for text in values:
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid {what} JSON {text!r}: {exc.msg}") from exc
        if not isinstance(value, dict):
            raise ValidationError(f"Each {what} must be a JSON object, got {text!r}")
        parsed.append(value)
    return parsed
