import logging

LOCAL_FORMAT = "%(asctime)s %(levelname)s [%(module)s] %(message)s"

# Lambda installs a handler on the root logger; modules log through it
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def configure_local_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Print handler logs to stderr when running outside Lambda.

    Leaves the root logger alone if a handler is already attached, so a
    local run never double-prints what the Lambda runtime already captures.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOCAL_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
