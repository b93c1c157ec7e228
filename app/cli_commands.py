"""
Flask CLI commands for the store terminal.

Commands:
- flask terminal: Interactive cart/catalog shell
- flask seed-catalog: Reset the catalog and load the default products and promotions
"""

import click
from flask import current_app
from app.exceptions import StoreError
from app.services.catalog_service import seed_default_catalog
from app.services.terminal_service import get_terminal
from app.utils.formatters import format_cart, format_catalog

HELP_TEXT = """Available commands:
cart print | c p        Print the optimized cart
cart reset | c r        Reset the cart
cart scan [codes] | c s Scan the given set of codes
cart promo [code]       Apply a promotion by hand
db                      Print the catalog contents
h                       Show this menu
q                       Quit"""


def print_help():
    click.echo(HELP_TEXT)


def proc_command_cart(args, terminal, quantum):
    """Handle `cart ...` commands."""
    if not args:
        click.echo('Cart command not provided!')
        print_help()
        return

    command = args[0].lower()
    if command in ('print', 'p'):
        click.echo(format_cart(terminal.get_cart(), quantum))
    elif command in ('reset', 'r'):
        terminal.reset_cart()
        click.echo('Cart reset.')
    elif command in ('scan', 's'):
        if len(args) < 2:
            click.echo('Code not provided!')
            print_help()
            return
        terminal.scan(args[1])
        click.echo(f'Scanned {len(args[1])} codes.')
    elif command == 'promo':
        if len(args) < 2:
            click.echo('Promotion code not provided!')
            print_help()
            return
        terminal.apply_promotion(args[1])
        click.echo(f'Promotion {args[1]} applied.')
    else:
        click.echo(f'Cart command `{args[0]}` not recognized!')
        print_help()


def proc_command(line, terminal, quantum) -> bool:
    """Run one shell line; returns False when the shell should finish."""
    args = line.split()
    if not args:
        return True

    command = args[0].lower()
    if command == 'q':
        return False
    if command == 'h':
        print_help()
    elif command in ('cart', 'c'):
        proc_command_cart(args[1:], terminal, quantum)
    elif command == 'db':
        click.echo(format_catalog(terminal.catalog, quantum))
    else:
        click.echo(f'Command `{line}` not recognized!')
        print_help()
    return True


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('terminal')
    def terminal_shell():
        """Interactive store terminal shell."""
        terminal = get_terminal()
        quantum = current_app.config.get('MONEY_QUANTUM', '0.01')
        stdin = click.get_text_stream('stdin')

        click.echo(click.style('Store terminal ready.', fg='green', bold=True))
        print_help()

        while True:
            click.echo('> ', nl=False)
            line = stdin.readline()
            if not line:
                break
            try:
                if not proc_command(line.strip(), terminal, quantum):
                    break
            except StoreError as e:
                click.echo(click.style(f'Error: {e.message}', fg='red'))

        click.echo('Bye!')

    @app.cli.command('seed-catalog')
    def seed_catalog():
        """Reset the catalog and load the default products and promotions."""
        terminal = get_terminal()
        terminal.catalog.reset()
        seed_default_catalog(terminal.catalog)
        click.echo(click.style('Catalog seeded.', fg='green'))
        click.echo(format_catalog(terminal.catalog, current_app.config.get('MONEY_QUANTUM', '0.01')))
