# corenlp_bridge/shared/logging_config.py
import sys
import logging
import structlog
from opentelemetry import trace
from corenlp_bridge.shared.config import settings

def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict

def configure_logging(log_format: str = None, log_level: str = None):
    """
    Configures structlog on top of the standard logging library to emit
    structured JSON logs or colored console logs.
    """
    log_format = log_format or settings.LOG_FORMAT
    log_level = (log_level or settings.LOG_LEVEL).upper()

    # 1. Define the chain of processors
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Route through standard logging on stderr; stdout is left to command output.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
    logging.getLogger().setLevel(log_level)
