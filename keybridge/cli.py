"""Command line interface for querying a remote signing service."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from keybridge import codec
from keybridge.client import SigningServiceClient, build_http_client
from keybridge.config import KeybridgeConfig, load_config
from keybridge.contracts import SignatureBlob, SignRequest
from keybridge.errors import ConfigError, DecodeError, ListIdentitiesError, SignError
from keybridge.wire import IdentityList

app = typer.Typer(help="CLI for the keybridge signing adapter")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Keybridge CLI entry point."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command("identities")
def identities(
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to keybridge YAML configuration"
    ),
) -> None:
    """
    List the identities the signing service offers.

    Example:
        keybridge identities
        # Output: arn:aws:ssm:eu-west-1:123456789012:parameter/ssh/deploy
    """
    config = _load(config_path)
    try:
        result = asyncio.run(_list_identities(config))
    except ListIdentitiesError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not result.identities:
        typer.echo("No identities available.")
        return
    for name in result.identities:
        typer.echo(name)


@app.command("sign")
def sign(
    pubkey: str = typer.Option(..., help="Base64 public key blob of the signing key"),
    data_file: Path = typer.Option(..., help="File whose contents are signed"),
    flags: int = typer.Option(0, help="Agent sign flags (2 = rsa-sha2-256, 4 = rsa-sha2-512)"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to keybridge YAML configuration"
    ),
) -> None:
    """
    Ask the signing service to sign a file and print the base64 signature blob.

    Example:
        keybridge sign --pubkey AAAAC3NzaC1lZDI1NTE5... --data-file challenge.bin --flags 4
    """
    config = _load(config_path)
    try:
        pubkey_blob = codec.decode(pubkey)
    except DecodeError as exc:
        typer.secho(f"Invalid --pubkey: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not data_file.is_file():
        typer.secho("Specified data file does not exist", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        data = data_file.read_bytes()
    except OSError as exc:
        typer.secho(f"Cannot read data file: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        request = SignRequest(pubkey_blob=pubkey_blob, data=data, flags=flags)
    except ValidationError:
        typer.secho("Flags must be an unsigned 32-bit integer", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        blob = asyncio.run(_sign(config, request))
    except SignError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(codec.encode(blob))


def _load(config_path: Optional[Path]) -> KeybridgeConfig:
    try:
        return load_config(str(config_path) if config_path else None)
    except ConfigError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)


async def _list_identities(config: KeybridgeConfig) -> IdentityList:
    async with build_http_client(config.service) as http:
        return await SigningServiceClient(http, config.service).list_identities()


async def _sign(config: KeybridgeConfig, request: SignRequest) -> SignatureBlob:
    async with build_http_client(config.service) as http:
        return await SigningServiceClient(http, config.service).sign(request)


if __name__ == "__main__":
    app()
