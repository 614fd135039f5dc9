import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"


def setup_logging(log_level: str = "INFO"):
    """Configure the root logger once; Streamlit reruns the page script on every interaction."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if any(getattr(h, "_snowday", False) for h in logger.handlers):
        return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    console_handler._snowday = True
    logger.addHandler(console_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger(__name__).debug("Logging initialised at %s", log_level)
