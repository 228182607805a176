"""Gzip a file while it is being uploaded.

``gzip_reader`` starts a worker thread that copies the source through a
``GzipFile`` into the write end of an OS pipe and hands back the read end.
The pipe's kernel buffer bounds memory: the worker blocks once the pipe is
full and the reader blocks until the worker has produced more output.

The returned future is the completion signal. It resolves to the number of
source bytes read, or raises the first read/write error of the worker. It
must be checked after the upload, because a failing source only shows up
on the consumer side as a short body.
"""

import gzip
import os
import shutil
from concurrent.futures import Future, ThreadPoolExecutor
from typing import BinaryIO, Iterator

from .log import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024  # 64 KB


class _CountingReader:
    def __init__(self, source: BinaryIO):
        self.source = source
        self.count = 0

    def read(self, size: int = -1) -> bytes:
        data = self.source.read(size)
        self.count += len(data)
        return data


def _compress(source: BinaryIO, pipe_writer: BinaryIO) -> int:
    counter = _CountingReader(source)
    with pipe_writer:  # closed 2nd
        with gzip.GzipFile(fileobj=pipe_writer, mode="wb") as gzip_writer:  # closed 1st
            shutil.copyfileobj(counter, gzip_writer, CHUNK_SIZE)
    logger.debug("compression_finished", bytes_read=counter.count)
    return counter.count


def gzip_reader(source: BinaryIO) -> tuple[BinaryIO, "Future[int]"]:
    read_fd, write_fd = os.pipe()
    pipe_reader = os.fdopen(read_fd, "rb")
    pipe_writer = os.fdopen(write_fd, "wb")

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="gzip")
    try:
        done = executor.submit(_compress, source, pipe_writer)
    except BaseException:
        pipe_reader.close()
        pipe_writer.close()
        raise
    finally:
        executor.shutdown(wait=False)
    return pipe_reader, done


def iter_chunks(reader: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the compressed stream in chunks until EOF."""
    while chunk := reader.read(chunk_size):
        yield chunk
