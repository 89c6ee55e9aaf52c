"""keyblob CLI - Main commands."""
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from keyblob import setup_logging
from keyblob.core.blob import KeyUsage, OutputFormat
from keyblob.core.config import ExportConfig
from keyblob.core.exceptions import KeyBlobError
from keyblob.exporter import KeyBlobExporter

app = typer.Typer(
    name="keyblob",
    help="Convert RSA PEM/DER keys to CryptoAPI key blobs",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)


class UsageChoice(str, Enum):
    sign = "sign"
    keyx = "keyx"


def _is_pem(data: bytes) -> bool:
    return b"-----BEGIN " in data


def _build_exporter(usage: UsageChoice, output_format: OutputFormat, verbose: bool) -> KeyBlobExporter:
    config = ExportConfig(
        usage=KeyUsage.parse(usage.value),
        output_format=output_format,
        log_level=logging.DEBUG if verbose else logging.WARNING,
    )
    if verbose:
        setup_logging(config.log_level)
    return KeyBlobExporter(config)


def _write_output(exporter: KeyBlobExporter, blob: bytes, output: Optional[Path]):
    """Render blob and send it to a file or stdout."""
    rendered = exporter.render(blob)

    if output is None:
        if isinstance(rendered, bytes):
            err_console.print("[red]Raw output needs --output; use --format hex or c-array for stdout[/red]")
            raise typer.Exit(1)
        typer.echo(rendered)
        return

    if isinstance(rendered, bytes):
        output.write_bytes(rendered)
    else:
        output.write_text(rendered + "\n")
    console.print(f"[green]Wrote {len(blob)}-byte blob to[/green] {escape(str(output))}")


@app.command()
def public(
    key_file: Path = typer.Argument(..., help="PEM or DER public key", exists=True, dir_okay=False),
    usage: UsageChoice = typer.Option(UsageChoice.keyx, "--usage", "-u", help="Key usage"),
    output_format: OutputFormat = typer.Option(OutputFormat.RAW, "--format", "-f", help="Output format"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Export a public key as PUBLICKEYBLOB."""
    exporter = _build_exporter(usage, output_format, verbose)
    data = key_file.read_bytes()

    try:
        if _is_pem(data):
            blob = exporter.export_public_pem(data)
        else:
            blob = exporter.export_public_der(data)
    except KeyBlobError as e:
        err_console.print(f"[red]Conversion failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _write_output(exporter, blob, output)


@app.command()
def private(
    key_file: Path = typer.Argument(..., help="PEM or DER private key", exists=True, dir_okay=False),
    usage: UsageChoice = typer.Option(UsageChoice.keyx, "--usage", "-u", help="Key usage"),
    output_format: OutputFormat = typer.Option(OutputFormat.RAW, "--format", "-f", help="Output format"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
    passphrase: str = typer.Option(None, "--passphrase", "-p", help="Password of an encrypted key"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Export a private key as PRIVATEKEYBLOB."""
    exporter = _build_exporter(usage, output_format, verbose)
    data = key_file.read_bytes()

    try:
        if _is_pem(data):
            blob = exporter.export_private_pem(data, passphrase=passphrase)
        else:
            blob = exporter.export_private_der(data, passphrase=passphrase)
    except KeyBlobError as e:
        err_console.print(f"[red]Conversion failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _write_output(exporter, blob, output)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
