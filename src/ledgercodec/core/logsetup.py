"""Logging helpers for scripts that drive the codec."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Library code only logs through module loggers; a script calls this once
    to see the output. Calling it again replaces the previous handler
    instead of stacking duplicates.

    Returns:
        logging.Logger: The configured ``ledgercodec`` logger.
    """
    root = logging.getLogger("ledgercodec")
    for handler in list(root.handlers):
        if getattr(handler, "_ledgercodec_stream", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ledgercodec_stream = True
    root.addHandler(handler)
    root.setLevel(level)
    return root
