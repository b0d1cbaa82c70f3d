"""Flask CLI commands."""

from __future__ import annotations

import json

import click
from flask.cli import with_appcontext

from .helpers import get_store
from .services.faculty_service import import_faculty_numbers, parse_faculty_file
from .services.requests_service import add_pending_requests


@click.command('import-faculty')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def import_faculty_command(path: str) -> None:
    """Load faculty numbers (one per line or a JSON array) into the allow-list."""
    with open(path, encoding='utf-8') as f:
        values = parse_faculty_file(f.read())
    added = import_faculty_numbers(get_store(), values)
    click.echo(f'Imported {added} faculty number(s), {len(values) - added} skipped.')


@click.command('seed-pending')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def seed_pending_command(path: str) -> None:
    """Insert pending requests from a JSON array of objects."""
    with open(path, encoding='utf-8') as f:
        try:
            documents = json.load(f)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f'Invalid JSON: {exc}') from exc
    if not isinstance(documents, list) or not all(isinstance(d, dict) for d in documents):
        raise click.ClickException('Expected a JSON array of objects')
    ids = add_pending_requests(get_store(), documents)
    click.echo(f'Inserted {len(ids)} pending request(s).')
