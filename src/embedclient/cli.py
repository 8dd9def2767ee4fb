"""CLI entrypoint for embedclient."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import typer

from embedclient.api.errors import ApiError
from embedclient.client import ApiClient
from embedclient.embeddings.mock import mock_transport
from embedclient.embeddings.types import EmbeddingsRequest, EmbeddingsResponse
from embedclient.env import load_dotenv
from embedclient.log import configure_logging
from embedclient.settings import ClientSettings
from embedclient.storage import write_response
from embedclient.ui.progress import status_spinner
from embedclient.ui.render import (
    render_banner,
    render_embeddings_table,
    render_error,
    render_info,
    render_json,
    render_success,
    render_summary_table,
)

app = typer.Typer(add_completion=False, help="Create text embeddings from the command line.")
request_app = typer.Typer(add_completion=False, help="Request helpers that never touch the network.")
app.add_typer(request_app, name="request")


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """embedclient CLI."""
    load_dotenv()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


@app.command("embed")
def embed(
    texts: list[str] = typer.Argument(..., help="One or more input texts."),
    model: str = typer.Option(None, "--model", "-m", help="Model id; defaults to the configured default model."),
    user: str = typer.Option(None, "--user", "-u", help="End-user identifier for abuse monitoring."),
    dimensions: int = typer.Option(None, "--dimensions", min=1),
    encoding_format: str = typer.Option(None, "--encoding-format", help="float or base64."),
    mock: bool = typer.Option(False, "--mock", help="Answer from a deterministic offline transport."),
    mock_dims: int = typer.Option(1536, "--mock-dims", min=1, help="Vector size produced in mock mode."),
    debug: bool = typer.Option(False, "--debug", help="Log raw request and response bodies."),
    output: Path = typer.Option(None, "--output", "-o", help="Write the full response JSON to this path."),
    as_json: bool = typer.Option(False, "--json", help="Print the full response JSON instead of a table."),
) -> None:
    """Create embeddings for TEXTS in a single request."""
    try:
        settings = ClientSettings.from_env(debug=debug or None)
        configure_logging(settings.debug)
        request = EmbeddingsRequest(
            input=texts[0] if len(texts) == 1 else texts,
            model=model or settings.default_model,
            user=user,
            encoding_format=encoding_format,
            dimensions=dimensions,
        )
        transport = mock_transport(dims=mock_dims) if mock else None
        client = ApiClient(settings, transport=transport)
    except ValueError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc

    if not as_json:
        render_banner("embedclient", f"{request.model} · {len(texts)} input(s){' · mock' if mock else ''}")
    try:
        with status_spinner("Requesting embeddings", enabled=not (as_json or settings.debug)):
            response = asyncio.run(_create(client, request))
    except ApiError as exc:
        render_error(f"Embeddings request failed: {exc}\n{exc.response_text}")
        raise typer.Exit(code=1) from exc
    except (httpx.HTTPError, ValueError) as exc:
        render_error(f"Embeddings request failed: {exc}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        write_response(output, response, texts=list(texts))

    if as_json:
        render_json(response.to_dict())
        return

    render_embeddings_table(response, texts)
    usage = response.usage
    render_summary_table(
        {
            "Model": response.model,
            "Vectors": str(len(response.data)),
            "Prompt tokens": str(usage.prompt_tokens) if usage else "n/a",
            "Total tokens": str(usage.total_tokens) if usage else "n/a",
            "Request id": response.request_id or "n/a",
            "Processing": f"{response.processing_time_ms} ms" if response.processing_time_ms is not None else "n/a",
        }
    )
    if output is not None:
        render_success(f"Response written to {output}")


@request_app.command("preview")
def request_preview(
    texts: list[str] = typer.Argument(..., help="One or more input texts."),
    model: str = typer.Option(None, "--model", "-m"),
    user: str = typer.Option(None, "--user", "-u"),
    dimensions: int = typer.Option(None, "--dimensions", min=1),
    encoding_format: str = typer.Option(None, "--encoding-format"),
) -> None:
    """Print the JSON body that `embed` would send."""
    try:
        request = EmbeddingsRequest(
            input=texts[0] if len(texts) == 1 else texts,
            model=model,
            user=user,
            encoding_format=encoding_format,
            dimensions=dimensions,
        )
    except ValueError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc
    render_json(request.to_dict())
    if request.model is None:
        render_info("No model set; the provider default will be used.")


async def _create(client: ApiClient, request: EmbeddingsRequest) -> EmbeddingsResponse:
    async with client:
        return await client.embeddings.create_embedding(request)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
