import logging
import sys

# stderr only: stdout carries the MCP stdio transport.
logger = logging.getLogger("claims_backend")
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
    logger.addHandler(handler)
# LOG_LEVEL is applied by configure_logging once settings are loaded.
logger.setLevel(logging.INFO)


def configure_logging(level: str) -> None:
    logger.setLevel(level.upper())
