# pipeline/log.py
#
# Import logger: the shared API logger under the "import" scope, so both
# processes print the same [scope MM:SS] line format.
from __future__ import annotations

from api.infrastructure.log import log as _log


def log(message: str) -> None:
    """Write a timestamped import log line to stdout."""
    _log(message, scope="import")
