# api/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.infrastructure.config import get_settings
from api.infrastructure.log import debug

JANELA_SEGUNDOS = 60.0
LIMIT_EXCEEDED_BODY = '{"detail": "Rate limit exceeded. Try again in 1 minute."}'


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 60s por IP do cliente.

    IPs sem requisicao dentro da janela saem do dicionario (varredura no
    maximo uma vez por janela).
    """

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = {}
        self._ultima_varredura = time.time()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute

        # 0 = sem limite (usado em testes)
        if limite == 0:
            return await call_next(request)

        if request.headers.get("X-API-Key"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        if now - self._ultima_varredura >= JANELA_SEGUNDOS:
            self.purge_expired(now)

        recentes = [t for t in self._requests.get(client_ip, []) if now - t < JANELA_SEGUNDOS]

        if len(recentes) >= limite:
            self._requests[client_ip] = recentes
            debug(f"rate limit atingido para {client_ip}")
            return Response(
                content=LIMIT_EXCEEDED_BODY,
                status_code=429,
                media_type="application/json",
            )

        recentes.append(now)
        self._requests[client_ip] = recentes
        return await call_next(request)

    def purge_expired(self, now: float) -> None:
        """Remove IPs cuja requisicao mais recente ja saiu da janela."""
        expirados = [
            ip for ip, tempos in self._requests.items()
            if not tempos or now - tempos[-1] >= JANELA_SEGUNDOS
        ]
        for ip in expirados:
            del self._requests[ip]
        self._ultima_varredura = now
