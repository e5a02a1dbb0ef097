"""
Notaire CLI.

Usage:
    notaire serve [--env ENV] [--host HOST] [--port PORT]
    notaire keygen
    notaire sign MESSAGE [--key KEY] [--api-url URL]
    notaire verify MESSAGE SIGNATURE [--api-url URL]
    notaire history [--clear] [--remote]
"""

import sys
from pathlib import Path

import click

from notaire.client import (
    ApiError,
    LocalHistoryStore,
    MessageSigner,
    NotaireClient,
    TransportError,
)
from notaire.domain.entities.signed_message import SignedMessageHistoryEntry

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_HISTORY_FILE = str(Path.home() / ".notaire" / "history.json")


def _badge(is_valid: bool) -> str:
    return "✅ Verified" if is_valid else "❌ Failed"


def _print_result(result: dict) -> None:
    click.echo(_badge(result.get("isValid", False)))
    click.echo(f"Message:   {result.get('originalMessage')}")
    if result.get("isValid"):
        click.echo(f"Signer:    {result.get('signer')}")
    else:
        click.echo(f"Error:     {result.get('error')}")
    if result.get("timestamp"):
        click.echo(f"Timestamp: {result.get('timestamp')}")


def _call_api(func, *args):
    """Run a client call, turning client errors into an error banner."""
    try:
        return func(*args)
    except TransportError as e:
        click.echo(f"Error: API unreachable. {e}", err=True)
        sys.exit(1)
    except ApiError as e:
        click.echo(f"Error: {e.code} ({e.status}): {e.message}", err=True)
        sys.exit(1)


@click.group()
def cli():
    """Notaire - Web3 message signature verification."""


@cli.command()
@click.option("--env", "-e", default=None, help="Environment (production, development, test)")
@click.option("--host", default=None, help="Bind host override")
@click.option("--port", "-p", type=int, default=None, help="Bind port override")
def serve(env, host, port):
    """Start the API server."""
    from notaire.config.settings import load_config, override_settings
    from notaire.main import main

    settings = load_config(env=env)
    updates = {}
    if host:
        updates["API_HOST"] = host
    if port:
        updates["API_PORT"] = port
    if updates:
        settings = settings.model_copy(update=updates)
    override_settings(settings)

    click.echo(
        f"Starting Notaire on {settings.API_HOST}:{settings.API_PORT} "
        f"(ENV={settings.ENV})"
    )
    main(settings)


@cli.command()
def keygen():
    """Generate a new signing key."""
    signer = MessageSigner.generate()
    click.echo(f"Address:     {signer.address}")
    click.echo(f"Private key: {signer.private_key}")


@cli.command()
@click.argument("message")
@click.option("--key", "-k", envvar="NOTAIRE_PRIVATE_KEY", required=True, help="Private key (hex)")
@click.option("--api-url", envvar="NOTAIRE_API_URL", default=DEFAULT_API_URL, show_default=True)
@click.option("--token", envvar="NOTAIRE_TOKEN", default=None, help="Bearer token")
@click.option("--history-file", envvar="NOTAIRE_HISTORY_FILE", default=DEFAULT_HISTORY_FILE)
def sign(message, key, api_url, token, history_file):
    """Sign MESSAGE locally and verify it through the API."""
    if not message.strip():
        click.echo("Error: Please enter a message to sign", err=True)
        sys.exit(1)

    try:
        signer = MessageSigner(key)
    except ValueError as e:
        click.echo(f"Error: Invalid private key. {e}", err=True)
        sys.exit(1)

    signed = signer.sign(message)
    click.echo(f"Address:   {signed.address}")
    click.echo(f"Signature: {signed.signature}")

    with NotaireClient(api_url, token=token) as client:
        result = _call_api(client.verify_signature, message, signed.signature)

    entry = SignedMessageHistoryEntry(
        message=message,
        signature=signed.signature,
        address=signed.address,
        verified=bool(result.get("isValid")),
        signer=result.get("signer"),
    )
    LocalHistoryStore(history_file).add(entry)

    _print_result(result)


@cli.command()
@click.argument("message")
@click.argument("signature")
@click.option("--api-url", envvar="NOTAIRE_API_URL", default=DEFAULT_API_URL, show_default=True)
@click.option("--token", envvar="NOTAIRE_TOKEN", default=None, help="Bearer token")
def verify(message, signature, api_url, token):
    """Verify SIGNATURE of MESSAGE through the API."""
    with NotaireClient(api_url, token=token) as client:
        result = _call_api(client.verify_signature, message, signature)
    _print_result(result)


@cli.command()
@click.option("--clear", is_flag=True, help="Clear the history")
@click.option("--remote", is_flag=True, help="Use server-side history (needs a token)")
@click.option("--api-url", envvar="NOTAIRE_API_URL", default=DEFAULT_API_URL, show_default=True)
@click.option("--token", envvar="NOTAIRE_TOKEN", default=None, help="Bearer token")
@click.option("--history-file", envvar="NOTAIRE_HISTORY_FILE", default=DEFAULT_HISTORY_FILE)
def history(clear, remote, api_url, token, history_file):
    """Show or clear signing history."""
    if remote:
        with NotaireClient(api_url, token=token) as client:
            if clear:
                removed = _call_api(client.clear_history)
                click.echo(f"Removed {removed} records")
                return
            items = _call_api(client.get_history)
        if not items:
            click.echo("No signatures yet")
        for item in items:
            click.echo(
                f"{item['createdAt']}  {_badge(item['isValid'])}  "
                f"{item.get('signer') or '-'}  {item['message']}"
            )
        return

    store = LocalHistoryStore(history_file)
    if clear:
        store.clear()
        click.echo("History cleared")
        return

    entries = store.load()
    if not entries:
        click.echo("No signatures yet")
    for entry in entries:
        click.echo(
            f"{entry.timestamp}  {_badge(entry.verified)}  "
            f"{entry.address}  {entry.message}"
        )


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
