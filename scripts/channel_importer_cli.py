#!/usr/bin/env python3
"""
Excel channel frequency import CLI.

Reads channel labels and frequencies from the first worksheet of a
workbook, upserts them into the database by channel, and prints the
stored table.

Usage:
    python scripts/channel_importer_cli.py import --file ExcelToTable.xlsx
    python scripts/channel_importer_cli.py import --validation-mode strict --skip-header
    python scripts/channel_importer_cli.py report
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
from typing import Optional

import click
from dotenv import load_dotenv

from backend.config import settings
from backend.database import create_session_factory, dispose_session_factory, session_scope
from services.channel_format import VALIDATION_MODES
from services.excel_import_service import run_channel_import
from services.report_service import ChannelReportService

# Load environment variables
load_dotenv()

logger = logging.getLogger('channel_importer_cli')


def configure_logging():
    """Send log records to stdout and, if LOG_FILE is set, to a file."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
        handlers=handlers
    )


def echo_rows(rows):
    """Print stored rows as a small table."""
    click.echo("\nFetched Data:")
    if not rows:
        click.echo("  (no rows)")
        return

    click.echo(f"  {'Channel':>8}  {'Frequency':>14}")
    for row in rows:
        click.echo(f"  {row.channel:>8}  {row.frequency:>14g}")


@click.group()
def cli():
    """Excel channel frequency import CLI"""
    configure_logging()


@cli.command('import')
@click.option('--file', '-f', 'file_path', default=settings.EXCEL_FILE_PATH,
              show_default=True, type=click.Path(dir_okay=False),
              help='Path to Excel file to import')
@click.option('--validation-mode', type=click.Choice(VALIDATION_MODES),
              default=settings.CHANNEL_VALIDATION, show_default=True,
              help='Channel label validation: legacy scan or strict marker+digits')
@click.option('--marker', default=settings.CHANNEL_MARKER, show_default=True,
              help='Channel label prefix character')
@click.option('--skip-header', is_flag=True, default=settings.SKIP_HEADER_ROW,
              help='Treat the first worksheet row as a header')
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL')
def import_cmd(file_path: str, validation_mode: str, marker: str,
               skip_header: bool, database_url: Optional[str]):
    """Import channel frequencies from a workbook."""
    click.echo(f"\n📁 Importing: {file_path}")
    click.echo(f"🔎 Validation mode: {validation_mode}")

    try:
        session_factory = create_session_factory(database_url)
    except Exception as e:
        logger.error(f"Could not connect to database: {e}", exc_info=True)
        click.echo(f"\n✗ Could not connect to database: {e}", err=True)
        return

    def on_progress(stage: str, percent: float, message: str):
        bar_length = 40
        filled = int(bar_length * percent / 100)
        bar = '█' * filled + '░' * (bar_length - filled)
        click.echo(f"[{bar}] {percent:.1f}% - {stage}: {message}")

    result = run_channel_import(
        session_factory,
        file_path,
        progress_callback=on_progress,
        marker=marker,
        validation_mode=validation_mode,
        skip_header=skip_header
    )
    dispose_session_factory(session_factory)

    stats = result.get('stats', {})
    click.echo(f"\nStatistics:")
    click.echo(f"  Extracted records: {result.get('extracted', 0)}")
    click.echo(f"  Skipped rows: {len(result.get('skipped', []))}")
    click.echo(f"  Inserted: {stats.get('inserted', 0)}")
    click.echo(f"  Updated: {stats.get('updated', 0)}")

    skipped = result.get('skipped', [])
    if skipped:
        click.echo(f"\nFirst 10 skipped rows:")
        for entry in skipped[:10]:
            click.echo(f"  Row {entry['row_num']}: {entry['reason']}")
        if len(skipped) > 10:
            click.echo(f"  ... and {len(skipped) - 10} more")

    echo_rows(result.get('rows', []))

    if result.get('errors'):
        click.echo(f"\n⚠️  Errors encountered: {result['errors']}", err=True)
    else:
        click.echo("\n✓ The program successfully completed.")


@cli.command('report')
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL')
def report_cmd(database_url: Optional[str]):
    """Print every stored channel frequency."""
    try:
        session_factory = create_session_factory(database_url)
        with session_scope(session_factory) as session:
            service = ChannelReportService(session)
            rows = service.fetch_all()
            error = service.last_error
        dispose_session_factory(session_factory)
    except Exception as e:
        logger.error(f"Report failed: {e}", exc_info=True)
        click.echo(f"\n✗ Report failed: {e}", err=True)
        return

    echo_rows(rows)
    if error:
        click.echo(f"\n⚠️  Error fetching data: {error}", err=True)


if __name__ == '__main__':
    cli()
