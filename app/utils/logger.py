import logging
import sys
from types import FrameType

from loguru import logger
from opentelemetry._logs import set_logger_provider
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor

from app.core.config import get_settings
from app.core.telemetry import service_resource

# Library loggers whose own handlers are replaced by the loguru bridge
HIJACKED_LOGGERS = (
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
    "gunicorn.error",
    "gunicorn.access",
    "fastapi",
    "sqlalchemy.engine",
)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <level>{level}</level>: "
    "<cyan>[{name}:{line}]</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """
    Forward records from the standard logging module to loguru.

    Records emitted by OpenTelemetry itself are dropped, otherwise the OTLP
    sink would log about its own exports forever.
    """

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith("opentelemetry"):
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _route_to_loguru(library_logger: logging.Logger) -> None:
    library_logger.handlers = [InterceptHandler()]
    library_logger.propagate = False


def _add_otlp_sink(level: str) -> None:
    settings = get_settings()
    logger_provider = LoggerProvider(resource=service_resource())
    set_logger_provider(logger_provider)

    exporter = OTLPLogExporter(
        endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
        insecure=settings.OTEL_EXPORTER_OTLP_INSECURE,
    )
    logger_provider.add_log_record_processor(BatchLogRecordProcessor(exporter))

    otel_handler = LoggingHandler(level=level, logger_provider=logger_provider)
    logger.add(otel_handler, level=level, serialize=True)


def setup_logging():
    """
    Route every log line of the process through loguru.

    Replaces the root and library handlers with `InterceptHandler`, installs a
    coloured stderr sink at ``LOG_LEVEL`` and, when
    ``OTEL_EXPORTER_OTLP_ENDPOINT`` is configured, an OTLP export sink. A
    failing OTLP setup is logged as a warning and does not stop the app.

    Returns:
        The configured loguru logger.
    """
    settings = get_settings()
    level = settings.LOG_LEVEL.upper()

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(level)

    for name in HIJACKED_LOGGERS:
        _route_to_loguru(logging.getLogger(name))

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=True,
        enqueue=True,
    )

    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        try:
            _add_otlp_sink(level)
        except Exception as e:
            logger.warning(f"OTLP log export unavailable, console only: {e}")
        else:
            logger.info(f"Exporting logs to {settings.OTEL_EXPORTER_OTLP_ENDPOINT}")

    return logger
