import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ``contentsync`` namespace.

    Handlers are attached by ``configure_logging`` at the application entry point;
    library code only asks for named loggers.
    """
    return logging.getLogger(f"contentsync.{name}")
