import base64

import click
from pydantic import BaseModel, ValidationError

from .config import Config
from .errors import AuthError, AuthScopeError, ParseError, RemoteError
from .models import UploadResult

STATUS_PAGE_PATH = "-/settings/code-intelligence/lsif-uploads"


class UploadPayload(BaseModel):
    id: str


def upload_reference(upload_id: str) -> str:
    """Opaque GraphQL-style ID of an upload, as used in status page URLs."""
    return base64.urlsafe_b64encode(f'LSIFUpload:"{upload_id}"'.encode()).decode()


def status_url(config: Config, repository: str, reference: str) -> str:
    return f"{config.endpoint}/{repository}/{STATUS_PAGE_PATH}/{reference}"


def interpret_response(
    status_code: int,
    reason: str,
    body: bytes,
    repository: str,
    config: Config,
    interactive: bool = False,
) -> UploadResult:
    """Turn the upload response into an UploadResult or raise the matching UploadError.

    A non-2xx status can come from something other than the upload endpoint
    (e.g. a wrong --endpoint), so the raw status and body are kept in the error.
    """
    text = body.decode("utf-8", errors="replace")

    if not 200 <= status_code < 300:
        if status_code == 401 and "must provide github_token" in text.lower():
            raise AuthScopeError(
                "you must provide --github-token=TOKEN, where TOKEN is a GitHub personal "
                "access token with 'repo' or 'public_repo' scope"
            )

        status = f"{status_code} {reason}".strip()
        if status_code == 401:
            if interactive:
                click.echo("You may need to specify or update your GitHub access token to use this endpoint.")
                click.echo("See https://github.com/sourcegraph/src-cli#authentication")
                click.echo("")
            raise AuthError(f"{status}\n\n{text}")
        raise RemoteError(f"{status}\n\n{text}")

    try:
        payload = UploadPayload.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(f"unexpected response body: {text!r}\n{e}") from e

    reference = upload_reference(payload.id)
    return UploadResult(
        upload_id=payload.id,
        reference=reference,
        status_url=status_url(config, repository, reference),
    )
