"""
PixelTrack - Main Application Entry Point
"""

import sqlite3
import sys
from pathlib import Path

import click

from pixeltrack.config import config
from pixeltrack.database.manager import DatabaseManager
from pixeltrack.database.migrations import MigrationError
from pixeltrack.export.exporter import EXPORT_FORMATS, StatsExporter, render_json, write_export
from pixeltrack.utils.logger import setup_logging


def _open_db(db_path):
    """Open (and migrate) the store, exiting on a failed migration"""
    if db_path is None:
        config.ensure_dirs()
    try:
        return DatabaseManager(Path(db_path) if db_path else config.DB_PATH)
    except (MigrationError, sqlite3.Error) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--db-path", type=click.Path(dir_okay=False), default=None,
              help=f"SQLite database file (default: {config.DB_PATH})")
@click.option("--no-log-file", is_flag=True, help="Log to stdout only")
@click.pass_context
def cli(ctx, db_path, no_log_file):
    """PixelTrack - Minimal pixel-based page view counter"""
    setup_logging(log_to_file=not no_log_file)
    ctx.obj = {"db_path": db_path}


@cli.command()
@click.option("--host", default=config.HOST, show_default=True, help="Listen address")
@click.option("--port", default=config.PORT, show_default=True, type=int, help="Listen port")
@click.pass_context
def serve(ctx, host, port):
    """Run the tracking and stats HTTP server"""
    from app import create_app

    db = _open_db(ctx.obj["db_path"])
    app = create_app(db)

    click.echo(f"Listening on {host}:{port}")
    app.run(debug=False, host=host, port=port, threaded=True)


@cli.command()
@click.pass_context
def migrate(ctx):
    """Bring the database schema up to date"""
    db = _open_db(ctx.obj["db_path"])
    click.echo(f"Database schema at version {db.get_schema_version()}")
    db.close()


@cli.command()
@click.option("--domain", default=None, help="Only rows for this exact domain")
@click.pass_context
def stats(ctx, domain):
    """Print the stats export as JSON"""
    db = _open_db(ctx.obj["db_path"])
    result = StatsExporter(db).export(domain)
    click.echo(render_json(result))
    db.close()


@cli.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False), required=True, help="Destination file")
@click.option("--format", "fmt", type=click.Choice(EXPORT_FORMATS), default="json", show_default=True)
@click.option("--domain", default=None, help="Only rows for this exact domain")
@click.pass_context
def export(ctx, output, fmt, domain):
    """Write the stats export to a file"""
    db = _open_db(ctx.obj["db_path"])
    result = StatsExporter(db).export(domain)
    path = write_export(result, Path(output), fmt)
    click.echo(f"Exported {result.summary.total_records} rows "
               f"({result.summary.total_views} views) to {path}")
    db.close()


if __name__ == "__main__":
    cli()
