import sys
import os
from loguru import logger

# Flag to track if logging has been configured
_logging_configured = False


def setup_logging(level="INFO", suppress_console=None, log_file=None, force=False):
    """
    Configures the global logger.

    Console logging goes to stderr so it never mixes with execution reports,
    which are written to stdout (or the sink passed to the lab).

    Args:
        level: Logging level (default: INFO)
        suppress_console: If True, suppress console logging. If None, check BRAINTEASERS_QUIET env var.
        log_file: Optional path for file logging. If None, check BRAINTEASERS_LOG_FILE env var.
        force: Reconfigure even if logging was already set up (used by the CLI --verbose flag).
    """
    global _logging_configured

    # Only configure once to avoid duplicate handlers
    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = os.getenv("BRAINTEASERS_QUIET", "").lower() in ("1", "true", "yes")

    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True
        )

    # File logging is opt-in only
    if log_file is None:
        log_file = os.getenv("BRAINTEASERS_LOG_FILE") or None

    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            rotation="10 MB",
            retention="1 day",
            catch=True,
            serialize=False
        )


# Configure the logger on import (will check env vars for quiet mode / log file)
setup_logging()
