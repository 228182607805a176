import httpx

from .compress import gzip_reader, iter_chunks
from .errors import CompressionError, NotFoundError, TransportError
from .log import get_logger
from .models import UploadRequest

logger = get_logger(__name__)


def send(request: UploadRequest, client: httpx.Client | None = None) -> httpx.Response:
    """POST the gzip-compressed dump file once and return the response.

    Transport failures are raised as TransportError and never retried. A
    compression failure wins over whatever the server answered.
    """
    try:
        source = open(request.file, "rb")
    except OSError as e:
        raise NotFoundError(f"Cannot read dump file {request.file}: {e}") from e

    owns_client = client is None
    if client is None:
        client = httpx.Client()

    try:
        with source:
            compressed, done = gzip_reader(source)
            try:
                logger.debug("upload_started", url=_redacted(request.url), headers=request.headers)
                response = client.post(
                    request.url,
                    content=iter_chunks(compressed),
                    headers=request.headers,
                )
            except httpx.HTTPError as e:
                raise TransportError(f"{type(e).__name__}: {e}") from e
            finally:
                # unblocks a worker still writing into a full pipe
                compressed.close()
                compression_error = done.exception()
    finally:
        if owns_client:
            client.close()

    if compression_error is not None:
        raise CompressionError(f"reading {request.file}: {compression_error}") from compression_error

    logger.debug("upload_finished", status_code=response.status_code)
    return response


def _redacted(url: str) -> str:
    parsed = httpx.URL(url)
    if "github_token" not in parsed.params:
        return url
    return str(parsed.copy_set_param("github_token", "***REDACTED***"))
