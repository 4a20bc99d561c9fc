# cli/main.py
import logging
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv

from bookstore.sa.database import Database
from .commands.db import db
from .commands.book import book
from .commands.author import author

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='Database connection string (defaults to $DATABASE_URL, then a local SQLite file)')
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str], verbose: bool):
    """Bookstore CLI"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = Database(database_url)
    ctx.call_on_close(ctx.obj.dispose)

cli.add_command(db)
cli.add_command(book)
cli.add_command(author)

def main():
    """Entry point for the CLI"""
    load_dotenv(find_dotenv(usecwd=True), override=False)
    cli()

if __name__ == '__main__':
    main()
