import sys

import click
import httpx

from .config import Config
from .errors import BrowserError
from .models import RenderedCommand, UploadContext, UploadResult
from .request import build_request
from .response import interpret_response
from .transport import send


def upload(
    context: UploadContext,
    config: Config,
    render: bool = False,
    open_browser: bool = False,
    interactive: bool | None = None,
    client: httpx.Client | None = None,
) -> UploadResult | RenderedCommand:
    """Upload a resolved dump, or print the curl command for it when ``render`` is set."""
    request = build_request(context, config, render=render)
    if isinstance(request, RenderedCommand):
        click.echo(request.text)
        return request

    response = send(request, client=client)

    if interactive is None:
        interactive = sys.stdout.isatty()
    result = interpret_response(
        response.status_code,
        response.reason_phrase,
        response.content,
        repository=context.repository,
        config=config,
        interactive=interactive,
    )

    click.echo("")
    click.echo("LSIF dump successfully uploaded for processing.")
    click.echo(f"View processing status at {result.status_url}.")

    if open_browser:
        # the upload already succeeded; a launch failure still fails the run
        exit_code = click.launch(result.status_url, wait=True)
        if exit_code != 0:
            raise BrowserError(f"failed to open {result.status_url} in a browser (exit status {exit_code})")

    return result
