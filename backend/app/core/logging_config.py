import logging
import sys
from opentelemetry import trace
from ..config import settings


class TelemetryFormatter(logging.Formatter):
    """
    Formatter that appends the current OpenTelemetry trace ID to log lines

    Lets log output be matched against traces when telemetry is enabled.
    """

    def format(self, record):
        trace_id = None
        span = trace.get_current_span()
        if span and span.is_recording():
            span_context = span.get_span_context()
            if span_context and span_context.trace_id:
                trace_id = format(span_context.trace_id, '032x')[:16]

        if not hasattr(self, '_original_fmt'):
            self._original_fmt = self._style._fmt

        if trace_id:
            record.trace_id = trace_id
            self._style._fmt = f"{self._original_fmt} [trace_id=%(trace_id)s]"
        else:
            self._style._fmt = self._original_fmt

        return super().format(record)


def setup_logging():
    """Configure logging for the application"""
    log_level = settings.log_level.upper()

    handler = logging.StreamHandler(sys.stdout)
    formatter = TelemetryFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler]
    )

    # Quiet noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
