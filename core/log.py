import logging
import sys
import threading

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
ROOT_LOGGER = "messaging"

logger = logging.getLogger(ROOT_LOGGER)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(level: str = "INFO") -> logging.Logger:
    logger.setLevel(level.upper())

    # attach the console handler only once, create_app may run many times in tests
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    return logger


def _log_uncaught(exc_type, exc_value, exc_tb):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))


def _log_uncaught_thread(args):
    if args.exc_type is SystemExit:
        return
    logger.critical(
        "Uncaught exception in thread %s",
        getattr(args.thread, "name", "?"),
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def install_excepthook() -> None:
    """Log failures nothing else caught. No recovery is attempted."""
    sys.excepthook = _log_uncaught
    threading.excepthook = _log_uncaught_thread
