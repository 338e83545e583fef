# api/infrastructure/log.py
#
# Logger compartilhado (API e pipeline de importacao) com tempo decorrido.
#
#   - Sem framework de logging: stdout com flush, uma linha por evento.
#   - debug() so escreve com API_DEBUG=true (tempos de consulta dos relatorios).
#   - Uma unica chamada sys.stdout.write por linha; as threads do overview
#     logam sem lock.
from __future__ import annotations

import sys
import time

from api.infrastructure.config import get_settings

_start = time.monotonic()


def log(message: str, *, scope: str = "api") -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[{scope} {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()


def debug(message: str, *, scope: str = "api") -> None:
    if get_settings().debug:
        log(message, scope=scope)
