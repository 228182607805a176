import shlex

import httpx

from .config import Config
from .models import RenderedCommand, UploadContext, UploadRequest

UPLOAD_PATH = "/.api/lsif/upload"
CONTENT_TYPE = "application/x-ndjson+lsif"


def query_params(context: UploadContext) -> dict[str, str]:
    """Query string parameters for the upload, skipping empty values."""
    candidates = {
        "repository": context.repository,
        "commit": context.commit,
        "github_token": context.github_token,
        "root": context.root,
        "indexerName": context.indexer_name,
    }
    return {key: value for key, value in candidates.items() if value}


def upload_url(context: UploadContext, config: Config) -> str:
    return str(httpx.URL(config.endpoint + UPLOAD_PATH, params=query_params(context)))


def request_headers(config: Config) -> dict[str, str]:
    headers = {"Content-Type": CONTENT_TYPE}
    if config.access_token:
        headers["Authorization"] = f"token {config.access_token}"
    return headers


def render_curl(context: UploadContext, config: Config) -> str:
    """An equivalent gzip | curl pipeline, every argument shell-quoted."""
    lines = [
        f"gzip -c {shlex.quote(context.file)} | curl \\",
        "   -X POST \\",
    ]
    for name, value in request_headers(config).items():
        lines.append(f"   {shlex.join(['-H', f'{name}: {value}'])} \\")
    lines.append(f"   {shlex.quote(upload_url(context, config))} \\")
    lines.append(f"   {shlex.join(['--data-binary', '@-'])}")
    return "\n".join(lines)


def build_request(
    context: UploadContext, config: Config, render: bool = False
) -> UploadRequest | RenderedCommand:
    """Build the upload request, or with ``render`` the curl command that would send it."""
    if render:
        return RenderedCommand(text=render_curl(context, config))
    return UploadRequest(
        url=upload_url(context, config),
        headers=request_headers(config),
        file=context.file,
    )
