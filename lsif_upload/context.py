"""Resolve the repository, commit, dump file and project root of an upload.

Values that are not supplied explicitly are read from the git working tree
the command runs in. Each resolved value is echoed as it is determined.
"""

import os
import re
from urllib.parse import urlsplit

import click

from . import git
from .errors import NotFoundError, ResolutionError, ValidationError
from .models import UploadContext

DEFAULT_DUMP_FILE = "./dump.lsif"
SSH_REMOTE = re.compile(r"^[^/@:]+@([^:/]+):([^:]+)$")


def parse_remote_url(url: str) -> str:
    """Turn a git remote URL into a repository name.

    Both ``git@github.com:gorilla/mux.git`` and
    ``https://github.com/gorilla/mux.git`` become ``github.com/gorilla/mux``.
    """
    match = SSH_REMOTE.match(url)
    if match:
        host, path = match.groups()
        return f"{host}/{path.removesuffix('.git').removeprefix('/')}"

    try:
        parsed = urlsplit(url)
    except ValueError:
        raise ValueError(f"unrecognized remote URL: {url}") from None
    # host without userinfo or port, case kept
    host = parsed.netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[1:].partition("]")[0]
    else:
        host = host.partition(":")[0]
    if not host:
        raise ValueError(f"unrecognized remote URL: {url}")
    return host + parsed.path.removesuffix(".git")


def normalize_root(root: str) -> str:
    cleaned = os.path.normpath(root).replace(os.sep, "/")
    if cleaned == ".." or cleaned.startswith("../"):
        raise ValidationError(f"--root is outside the repository: {cleaned}")
    if cleaned in (".", "/"):
        return ""
    return cleaned


def _resolve_repository() -> str:
    try:
        url = git.remote_url()
    except git.GitError as e:
        raise ResolutionError(
            f"{e}\n"
            "Unable to detect repository from environment.\n"
            "Either cd into a git repository or set --repo explicitly."
        ) from e
    try:
        return parse_remote_url(url)
    except ValueError as e:
        raise ResolutionError(f"{e}\nSet --repo explicitly.") from e


def _resolve_commit() -> str:
    try:
        return git.head_commit()
    except git.GitError as e:
        raise ResolutionError(
            f"{e}\n"
            "Unable to detect commit from environment.\n"
            "Either cd into a git repository or set --commit explicitly."
        ) from e


def _derive_root(file: str) -> str:
    """Directory of the dump file relative to the top of the working tree."""
    try:
        top = os.path.realpath(git.top_level())
        rel = os.path.relpath(os.path.realpath(file), top)
    except (git.GitError, ValueError) as e:
        raise ResolutionError(
            f"{e}\n"
            "Unable to detect root of LSIF dump from environment.\n"
            "Either cd into a git repository or set --root explicitly."
        ) from e
    return os.path.dirname(rel)


def resolve_context(
    repo: str = "",
    commit: str = "",
    file: str = DEFAULT_DUMP_FILE,
    root: str | None = None,
    github_token: str = "",
    indexer_name: str = "",
) -> UploadContext:
    """Fill in every field of an UploadContext.

    ``root=None`` means the root was not given and is derived from the dump
    file's location; an explicit value (even "") is only normalized.
    """
    repo = repo or _resolve_repository()
    click.echo(f"Repository: {repo}")

    commit = commit or _resolve_commit()
    click.echo(f"Commit: {commit}")

    if not os.path.isfile(file):
        raise NotFoundError(
            f"File does not exist: {file}\n"
            "Either cd to the directory where it was generated or set --file explicitly."
        )
    click.echo(f"File: {file}")

    if root is None:
        root = _derive_root(file)
    root = normalize_root(root)
    click.echo(f"Root: {root}")

    return UploadContext(
        repository=repo,
        commit=commit,
        file=file,
        root=root,
        github_token=github_token,
        indexer_name=indexer_name,
    )
