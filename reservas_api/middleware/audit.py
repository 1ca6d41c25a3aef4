import time
import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from reservas_api.models.audit import AuditLog

logger = logging.getLogger(__name__)


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Logs every API request with its status and latency and stores it in the
    audit table of the application's database
    """

    def __init__(self, app, excluded_paths=None):
        super().__init__(app)
        # Docs and schema requests are not audited
        self.excluded_paths = set(excluded_paths or ())

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        start_time = time.perf_counter()

        status_code = 500
        error_detail = None

        try:
            response = await call_next(request)
            status_code = response.status_code

        except Exception as e:
            error_detail = str(e)
            logger.error(f"Error processing request {request.url.path}: {error_detail}")
            raise

        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

            logger.info(
                f"{request.method} {request.url.path} - "
                f"Status: {status_code} - "
                f"Time: {duration_ms:.2f}ms"
            )

            # The insert blocks, so it runs off the event loop
            await run_in_threadpool(
                self._save_audit_log,
                request,
                status_code=status_code,
                duration_ms=duration_ms,
                error_detail=error_detail,
            )

        return response

    def _save_audit_log(
        self,
        request: Request,
        status_code: int,
        duration_ms: float,
        error_detail: Optional[str] = None,
    ):
        """
        Uses its own session so the request's session is left untouched.
        Failures are logged and never reach the client.
        """
        try:
            with request.app.state.database.session_scope() as db:
                db.add(
                    AuditLog(
                        method=request.method,
                        path=request.url.path,
                        status_code=status_code,
                        duration_ms=duration_ms,
                        client_ip=request.client.host if request.client else None,
                        error_detail=error_detail,
                    )
                )
        except Exception as e:
            logger.error(f"Failed to save audit log: {e}")
