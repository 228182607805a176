import subprocess

from .log import get_logger

logger = get_logger(__name__)


class GitError(RuntimeError):
    pass


def _git(*args: str) -> str:
    """Run a read-only git command and return its stripped stdout."""
    command = ["git", *args]
    logger.debug("git_command", command=" ".join(command))
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        raise GitError(f"Failed to invoke git: {e}") from e
    if result.returncode != 0:
        raise GitError(f"Failed to invoke git: {result.stderr.strip() or f'exit status {result.returncode}'}")
    return result.stdout.strip()


def remote_url() -> str:
    """URL of the `origin` remote."""
    return _git("remote", "get-url", "origin")


def head_commit() -> str:
    """Hash of the currently checked-out commit."""
    return _git("rev-parse", "HEAD")


def top_level() -> str:
    """Absolute path of the working tree's top-level directory."""
    return _git("rev-parse", "--show-toplevel")
