"""
Vendor Registry CLI

Runs the API server and drives the vendor list from a terminal through the
same client, state, and view the UI layer uses.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Optional

import httpx
import typer

from vendor_registry.client.service import VendorApiError, VendorClient
from vendor_registry.client.state import VendorState
from vendor_registry.client.view import VendorListView
from vendor_registry.core.config import settings
from vendor_registry.domain.vendor import PartnerType
from vendor_registry.schemas.vendor import VendorCreate

app = typer.Typer(help="Vendor Registry: API server and vendor list commands.")

ApiUrl = typer.Option(
    None, "--api-url", help="Vendors resource URL (default: VENDOR_API_URL + /api/vendors)."
)


def _run(
    api_url: Optional[str],
    action: Callable[[VendorListView], Awaitable[None]],
    confirm: Callable[[str], bool] = typer.confirm,
) -> None:
    """Build client, state, and view; run ``action``; print the list."""

    async def main() -> None:
        async with VendorClient(api_url) as client:
            view = VendorListView(VendorState(client), confirm=confirm)
            try:
                await action(view)
            except (VendorApiError, httpx.HTTPError) as exc:
                typer.secho(view.state.error or str(exc), fg=typer.colors.RED, err=True)
                if isinstance(exc, VendorApiError):
                    typer.secho(exc.message, fg=typer.colors.RED, err=True)
                raise typer.Exit(1)
            typer.echo(view.render())
            if view.state.error:
                raise typer.Exit(1)

    asyncio.run(main())


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: APP_HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (default: APP_PORT)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the vendor API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "vendor_registry.main:app",
        host=host or settings.app_host,
        port=port or settings.app_port,
        reload=reload,
    )


@app.command("list")
def list_vendors(api_url: Optional[str] = ApiUrl) -> None:
    """Show all vendors, newest first."""

    async def action(view: VendorListView) -> None:
        await view.mount()

    _run(api_url, action)


@app.command()
def add(
    name: str = typer.Option(..., help="Company name."),
    contact_person: str = typer.Option(..., help="Contact person."),
    email: str = typer.Option(..., help="Contact email (must be unused)."),
    partner_type: PartnerType = typer.Option(PartnerType.SUPPLIER, case_sensitive=False),
    api_url: Optional[str] = ApiUrl,
) -> None:
    """Register a vendor and show the refreshed list."""

    async def action(view: VendorListView) -> None:
        if await view.state.check_email_exists(email):
            typer.secho(
                "A vendor with this email already exists.", fg=typer.colors.RED, err=True
            )
            raise typer.Exit(1)
        await view.state.add(
            VendorCreate(
                name=name,
                contact_person=contact_person,
                email=email,
                partner_type=partner_type.value,
            )
        )

    _run(api_url, action)


@app.command()
def delete(
    vendor_id: int = typer.Argument(..., help="Vendor id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
    api_url: Optional[str] = ApiUrl,
) -> None:
    """Delete a vendor by id and show the refreshed list."""

    async def action(view: VendorListView) -> None:
        if not await view.delete(vendor_id):
            await view.mount()

    _run(api_url, action, confirm=(lambda _: True) if yes else typer.confirm)


@app.command("check-email")
def check_email(email: str, api_url: Optional[str] = ApiUrl) -> None:
    """Print whether a vendor already uses EMAIL."""

    async def main() -> bool:
        async with VendorClient(api_url) as client:
            return await VendorState(client).check_email_exists(email)

    try:
        exists = asyncio.run(main())
    except (VendorApiError, httpx.HTTPError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo("exists" if exists else "available")


if __name__ == "__main__":
    app()
