"""
Flask CLI Commands for Database Management
Run with: flask db-manage init, flask db-manage reset, etc.
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from app.db_init.init_db import init_database, clear_database, reset_database
from app.db_init.sample_data import SAMPLE_FLIGHTS


def _store():
    return current_app.extensions['ticket_store']


@click.group()
def db_commands():
    """Database management commands"""
    pass


@db_commands.command('init')
@click.option('--no-sample-data', is_flag=True, help='Skip loading sample flights')
@with_appcontext
def init_db_command(no_sample_data):
    """Initialize the database with tables and optional sample flights"""
    try:
        total = init_database(_store(), with_sample_data=not no_sample_data)
        click.echo(f'✅ Database initialized successfully! ({total} flights)')
    except Exception as e:
        click.echo(f'❌ Error initializing database: {str(e)}', err=True)
        raise


@db_commands.command('reset')
@click.confirmation_option(prompt='⚠️  This will delete all data. Are you sure?')
@with_appcontext
def reset_db_command():
    """Reset the database (drop all tables and recreate with sample flights)"""
    try:
        total = reset_database(_store())
        click.echo(f'✅ Database reset successfully! ({total} flights)')
    except Exception as e:
        click.echo(f'❌ Error resetting database: {str(e)}', err=True)
        raise


@db_commands.command('clear')
@click.confirmation_option(prompt='⚠️  This will delete all tables. Are you sure?')
@with_appcontext
def clear_db_command():
    """Clear all database tables"""
    try:
        clear_database()
        click.echo('✅ Database cleared successfully!')
    except Exception as e:
        click.echo(f'❌ Error clearing database: {str(e)}', err=True)
        raise


@db_commands.command('load-flights')
@click.option('--clear', is_flag=True, help='Delete existing flights before loading')
@with_appcontext
def load_flights_command(clear):
    '''Load sample flights into the database.'''
    success, errors, error_list = _store().load_many(SAMPLE_FLIGHTS, clear_existing=clear)

    if errors == 0:
        click.echo(f'✅ Successfully loaded {success} flights!')
    else:
        click.echo(f'⚠️ Loaded {success} flights with {errors} errors.')
        for error in error_list:
            click.echo(f'  ❌ {error}')


def register_commands(app):
    """Register CLI commands with the Flask app"""
    app.cli.add_command(db_commands, name='db-manage')
