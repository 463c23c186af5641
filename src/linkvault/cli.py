"""
Command-line interface for the link vault.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from linkvault.app import LinkVaultApp, create_app
from linkvault.config import VaultConfig
from linkvault.schema.chat_message import ChatMessage, ChatRole
from linkvault.schema.link_record import LinkRecord, Theme

app = typer.Typer(
    name="linkvault",
    help="Link Vault - save links, let the model tag them, ask questions about them",
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    provider: str = typer.Option(None, "--provider", "-p", help="Model provider: gemini or mock"),
    data_dir: Path = typer.Option(None, "--data-dir", "-d", help="Directory holding vault.sqlite"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging and settings shared by every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

    config = VaultConfig.from_env()
    if provider:
        config.provider = provider
    if data_dir:
        config.data_dir = data_dir.expanduser()
    ctx.obj = config


def _open(ctx: typer.Context) -> LinkVaultApp:
    config: VaultConfig = ctx.obj
    try:
        return create_app(config)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


def _links_table(links: Iterable[LinkRecord], title: str | None = None) -> Table:
    table = Table(show_header=True, header_style="bold magenta", title=title)
    table.add_column("ID", style="dim")
    table.add_column("Title")
    table.add_column("URL")
    table.add_column("Tags")

    for link in links:
        table.add_row(link.id[:8], link.title, link.url, ", ".join(link.tags))
    return table


@app.command()
def add(ctx: typer.Context, url: str = typer.Argument(..., help="URL to save")):
    """Save a link and annotate it."""
    vault_app = _open(ctx)
    try:
        with console.status("Annotating..."):
            record = asyncio.run(vault_app.vault.add_link(url))
    finally:
        vault_app.close()

    if record is None:
        console.print("[yellow]Nothing to add.[/yellow]")
        return

    console.print(f"\n[bold green]Saved[/bold green] {record.title}")
    console.print(f"  {record.description}")
    console.print(f"  [dim]{record.id}[/dim]  tags: {', '.join(record.tags)}\n")


def _resolve_id(vault_app: LinkVaultApp, prefix: str) -> str | None:
    matches = [link.id for link in vault_app.vault.links if link.id.startswith(prefix)]
    return matches[0] if len(matches) == 1 else None


@app.command()
def delete(ctx: typer.Context, link_id: str = typer.Argument(..., help="Link ID (or unique prefix)")):
    """Delete a saved link."""
    vault_app = _open(ctx)
    try:
        resolved = _resolve_id(vault_app, link_id)
        if resolved is None:
            console.print(f"[red]No single link matches {link_id}[/red]")
            raise typer.Exit(1)
        vault_app.vault.delete_link(resolved)
    finally:
        vault_app.close()

    console.print(f"[green]Deleted {resolved}[/green]")


@app.command(name="list")
def list_links(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Substring of title, description or tag"),
    tag: str = typer.Option(None, "--tag", "-t", help="Only links carrying this tag"),
):
    """List saved links, most recent first."""
    vault_app = _open(ctx)
    try:
        links = vault_app.vault.filter(search, tag)
    finally:
        vault_app.close()

    if not links:
        console.print("[dim]Archive empty.[/dim]")
        return

    console.print(_links_table(links))


@app.command()
def tags(ctx: typer.Context):
    """Show every tag in the vault."""
    vault_app = _open(ctx)
    try:
        all_tags = vault_app.vault.list_tags()
    finally:
        vault_app.close()

    for t in all_tags:
        console.print(t)


def _print_message(message: ChatMessage) -> None:
    if message.role is ChatRole.MODEL:
        console.print(f"[bold cyan]vault>[/bold cyan] {message.text}")


async def _ask(vault_app: LinkVaultApp, question: str) -> None:
    highlighted: list[str] = []
    vault_app.conversation.add_highlight_listener(highlighted.extend)
    vault_app.conversation.add_transcript_listener(_print_message)

    with console.status("Thinking..."):
        await vault_app.conversation.submit(question)

    _print_highlights(vault_app, highlighted)


def _print_highlights(vault_app: LinkVaultApp, ids: list[str]) -> None:
    links = [link for link in (vault_app.vault.get(i) for i in ids) if link is not None]
    if links:
        console.print(_links_table(links, title="Related links"))


@app.command()
def ask(ctx: typer.Context, question: str = typer.Argument(..., help="Question about your links")):
    """Ask one question about the vault."""
    vault_app = _open(ctx)
    try:
        asyncio.run(_ask(vault_app, question))
    finally:
        vault_app.close()


@app.command()
def chat(ctx: typer.Context):
    """Chat about the vault until a blank line or EOF."""
    vault_app = _open(ctx)

    async def _chat():
        conversation = vault_app.conversation
        conversation.add_transcript_listener(_print_message)
        highlighted: list[str] = []
        conversation.add_highlight_listener(highlighted.extend)

        console.print("[bold]Ask about your links.[/bold] Blank line to quit.\n")
        while True:
            try:
                question = console.input("[bold]you>[/bold] ")
            except EOFError:
                break
            if not question.strip():
                break

            highlighted.clear()
            with console.status("Thinking..."):
                await conversation.submit(question)
            _print_highlights(vault_app, highlighted)

    try:
        asyncio.run(_chat())
    finally:
        vault_app.close()


@app.command()
def theme(ctx: typer.Context, name: Theme = typer.Argument(None, help="Theme to switch to")):
    """Show or set the theme preference."""
    vault_app = _open(ctx)
    try:
        if name is None:
            console.print(vault_app.persistence.load_theme().value)
        else:
            vault_app.persistence.save_theme(name)
            console.print(f"[green]Theme set to {name.value}[/green]")
    finally:
        vault_app.close()


@app.command()
def info(ctx: typer.Context):
    """Show the active configuration."""
    config: VaultConfig = ctx.obj

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in config.describe().items():
        table.add_row(key, value)

    console.print(table)


if __name__ == "__main__":
    app()
