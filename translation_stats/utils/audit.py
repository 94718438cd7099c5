"""Audit logging for changes to the stored settings and cache.

Call the helpers only after the action has run: an audit line records
something that happened, never an attempt.
"""

import getpass
import logging
import socket

from fastapi import Request

logger = logging.getLogger("audit")


def _operator() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def log_action(request: Request, username: str, role: str, action: str) -> None:
    """Write one audit line for *action* performed during *request*."""
    client_ip = request.client.host if request.client else "unknown"
    request_id = getattr(request.state, "request_id", "n/a")
    logger.info(
        "AUDIT action=%s user=%s role=%s ip=%s request_id=%s path=%s",
        action,
        username,
        role,
        client_ip,
        request_id,
        request.url.path,
    )


def log_operator_action(action: str, result: bool) -> None:
    """Write one audit line for *action* run from the command line."""
    logger.info(
        "AUDIT action=%s user=%s role=operator host=%s result=%s",
        action,
        _operator(),
        socket.gethostname(),
        result,
    )
