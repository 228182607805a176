"""structlog setup for diagnostic output.

User-facing progress goes through ``click.echo``; this logger is for the
debug trail enabled with ``--verbose``. Everything is written to stderr so
stdout stays clean for ``--get-curl`` output.
"""

import logging
import sys
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

SENSITIVE_KEYS = {"token", "authorization", "access_token", "github_token", "secret"}
REDACTED = "***REDACTED***"


def redact_tokens(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    for key in list(event_dict.keys()):
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS) and event_dict[key]:
            event_dict[key] = REDACTED
        elif isinstance(event_dict[key], dict):
            event_dict[key] = {
                k: REDACTED if any(s in k.lower() for s in SENSITIVE_KEYS) else v
                for k, v in event_dict[key].items()
            }
    return event_dict


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        redact_tokens,
        structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
