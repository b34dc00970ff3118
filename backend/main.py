"""
DabotCentral admin CLI.

Operator commands that would otherwise need hand-written SQL: promoting a
user to admin and managing that user's API keys. Runs the same services as
the HTTP API, against the database configured in the environment.

Usage:
    python main.py grant-admin alice@example.com
    python main.py create-key alice@example.com "CI pipeline"
    python main.py list-keys alice@example.com
    python main.py revoke-key alice@example.com <key-id>
"""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.table import Table

from api.dependencies import ServiceContainer
from modules.auth.credentials import is_valid_email
from modules.auth.models import User
from shared.exceptions import DabotError
from shared.models import UserRole

console = Console()


def require_user(container: ServiceContainer, email: str) -> User:
    """Look up a user by email, exiting if there is none."""
    user = container.users.get_by_email(email)
    if user is None:
        console.print(f"[red]Error:[/red] No user with email {email}")
        sys.exit(1)
    return user


def grant_admin(container: ServiceContainer, email: str) -> None:
    """Give a user the admin role, creating the user if needed."""
    if not is_valid_email(email):
        console.print(f"[red]Error:[/red] Not a valid email address: {email}")
        sys.exit(1)

    user = container.users.set_role(email, UserRole.ADMIN)
    console.print(f"[green]✓[/green] {user.email} is now an admin [dim]({user.id})[/dim]")


async def create_key(container: ServiceContainer, email: str, name: str) -> None:
    """Create an API key for a user and print it once."""
    user = require_user(container, email)
    if not user.to_authenticated().is_admin:
        console.print(f"[yellow]Warning:[/yellow] {email} is not an admin; the key can't manage other keys")

    created = await container.api_keys.create(user.id, name)
    console.print(f"[green]✓[/green] Created key [cyan]{created.name}[/cyan] [dim]({created.id})[/dim]")
    console.print()
    console.print(f"  [bold]{created.key}[/bold]")
    console.print()
    console.print("[dim]Store it now; it cannot be shown again.[/dim]")


async def list_keys(container: ServiceContainer, email: str) -> None:
    """Print a user's keys, newest first."""
    user = require_user(container, email)
    keys = await container.api_keys.list(user.id)

    if not keys:
        console.print(f"[dim]No API keys for {email}.[/dim]")
        return

    table = Table(title=f"API keys for {email}")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Created")
    table.add_column("Last used")
    table.add_column("Status")

    for key in keys:
        table.add_row(
            key.id,
            key.name,
            key.created_at.strftime("%Y-%m-%d %H:%M") if key.created_at else "",
            key.last_used_at.strftime("%Y-%m-%d %H:%M") if key.last_used_at else "[dim]never[/dim]",
            "[green]Active[/green]" if key.is_active else "[red]Revoked[/red]",
        )

    console.print(table)


async def revoke_key(container: ServiceContainer, email: str, key_id: str) -> None:
    """Deactivate one of a user's keys."""
    user = require_user(container, email)
    await container.api_keys.revoke(user.id, key_id)
    console.print(f"[green]✓[/green] Key {key_id} is inactive (if it belonged to {email})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DabotCentral admin commands")
    commands = parser.add_subparsers(dest="command", required=True)

    grant = commands.add_parser("grant-admin", help="Give a user the admin role")
    grant.add_argument("email")

    create = commands.add_parser("create-key", help="Create an API key for a user")
    create.add_argument("email")
    create.add_argument("name", help="Label for the key")

    listing = commands.add_parser("list-keys", help="List a user's API keys")
    listing.add_argument("email")

    revoke = commands.add_parser("revoke-key", help="Deactivate one of a user's API keys")
    revoke.add_argument("email")
    revoke.add_argument("key_id")

    return parser


def main(argv: list[str] | None = None, container: ServiceContainer | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    container = container or ServiceContainer()

    try:
        if args.command == "grant-admin":
            grant_admin(container, args.email)
        elif args.command == "create-key":
            asyncio.run(create_key(container, args.email, args.name))
        elif args.command == "list-keys":
            asyncio.run(list_keys(container, args.email))
        elif args.command == "revoke-key":
            asyncio.run(revoke_key(container, args.email, args.key_id))
    except DabotError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
