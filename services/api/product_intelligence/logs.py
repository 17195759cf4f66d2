import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"
FALLBACK_LEVEL = "INFO"

_sink_id: int | None = None


def configure_logging(level: str = FALLBACK_LEVEL) -> None:
    """Install a single stderr sink at `level`.

    The first call drops loguru's default handler; later calls only swap the
    sink installed here, so sinks added elsewhere survive reconfiguration.
    Unknown level names fall back to INFO.
    """
    global _sink_id
    name = level.upper()
    try:
        logger.level(name)
        unknown = False
    except ValueError:
        name, unknown = FALLBACK_LEVEL, True

    if _sink_id is None:
        logger.remove()
    else:
        logger.remove(_sink_id)
    _sink_id = logger.add(sys.stderr, level=name, format=LOG_FORMAT)
    if unknown:
        logger.warning("unknown log level {!r}, using {}", level, FALLBACK_LEVEL)
