"""Operational command line for the Orders API."""

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.orders_api.core.services import DbSessionService, PasswordService
from src.orders_api.core.services.accounts import UserService
from src.orders_api.core.services.database.db_manage import DbManageService
from src.orders_api.entities.core.user import User, UserCreate, UserRepository
from src.orders_api.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="Orders API - database and server management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


async def _init_db() -> None:
    db_service = DbSessionService()
    try:
        await DbManageService(db_service).create_all()
    finally:
        await db_service.dispose()


async def _create_user(command: UserCreate):
    db_service = DbSessionService()
    try:
        async with db_service.session_scope() as session:
            service = UserService(UserRepository(session), PasswordService())
            return await service.create(command)
    finally:
        await db_service.dispose()


@app.command("init-db")
def init_db() -> None:
    """Create every table in the configured database."""
    asyncio.run(_init_db())
    console.print(f"[green]✅ Tables created in {get_config().database.url}[/green]")


@app.command("create-user")
def create_user(
    identification: str = typer.Option(..., "--identification", "-i", help="Identification number"),
    name: str = typer.Option(..., "--name", "-n", help="Full name"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    phone: str = typer.Option(..., "--phone", help="Phone number"),
    address: str = typer.Option(..., "--address", help="Postal address"),
    password: str = typer.Option(..., "--password", "-p", help="Password", prompt=True, hide_input=True),
    role: str = typer.Option("Admin", "--role", "-r", help="Role written into issued tokens"),
) -> None:
    """Bootstrap a user account, hashing its password."""
    try:
        command = UserCreate(
            identification=identification,
            name=name,
            email=email,
            phone=phone,
            address=address,
            password=password,
            role=role,
        )
    except ValidationError as e:
        console.print(f"[red]❌ Invalid user: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    result = asyncio.run(_create_user(command))
    if not result.succeeded:
        console.print(f"[red]❌ {escape(result.message)}[/red]")
        raise typer.Exit(code=1)

    user: User = result.value
    table = Table(title="User created")
    table.add_column("Key", style="cyan")
    table.add_column("Identification", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Role", style="magenta")
    table.add_row(str(user.key), user.identification, user.email, user.role)
    console.print(table)


@app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int = typer.Option(None, "--port", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.orders_api.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,  # requests are logged by middleware
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
