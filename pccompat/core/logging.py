"""
Logging configuration for PC Compatibility Engine
"""
import logging
import sys
import time
import json
from pathlib import Path
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from pccompat.core.config import settings


def setup_logging():
    """Setup logging configuration"""
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if not settings.debug else logging.DEBUG)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s - %(message)s'
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if settings.log_dir:
        # Create logs directory if it doesn't exist
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # File handler for all logs
        file_handler = logging.FileHandler(log_dir / "app.log")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        # File handler for errors only
        error_file_handler = logging.FileHandler(log_dir / "error.log")
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_file_handler)

    # Set specific loggers
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name"""
    return logging.getLogger(name)


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses"""

    def __init__(self, app, exclude_paths: list = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or [f"{settings.api_prefix}/health", "/favicon.ico"]
        self.logger = get_logger("http")

    async def dispatch(self, request: Request, call_next):
        # Skip logging for excluded paths
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        start_time = time.time()

        request_info = {
            "method": request.method,
            "path": request.url.path,
            "query": str(request.url.query),
            "client_ip": self._get_client_ip(request),
            "content_length": request.headers.get("content-length", 0),
        }

        self.logger.info(f"REQUEST: {json.dumps(request_info)}")

        try:
            response = await call_next(request)

            response_time = time.time() - start_time
            response_info = {
                "status_code": response.status_code,
                "response_time_ms": round(response_time * 1000, 2),
            }

            log_level = "info" if response.status_code < 400 else "warning" if response.status_code < 500 else "error"
            log_method = getattr(self.logger, log_level)
            log_method(f"RESPONSE: {json.dumps({**request_info, **response_info})}")

            return response

        except Exception as e:
            response_time = time.time() - start_time
            error_info = {
                **request_info,
                "error": str(e),
                "response_time_ms": round(response_time * 1000, 2),
                "status_code": 500
            }
            self.logger.error(f"ERROR: {json.dumps(error_info)}")
            raise

    def _get_client_ip(self, request: Request) -> str:
        """Get the real client IP address"""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()

        return request.client.host if request.client else "unknown"
