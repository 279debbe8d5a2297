import logging.config
import os

handlers = None


def init():
    global handlers

    if handlers is not None:
        return

    handlers = []

    if os.environ.get("OPENAPI3DOC_LOGGING_HANDLERS", None) is None:
        return

    """export OPENAPI3DOC_LOGGING_HANDLERS=debug to get /tmp/openapi3doc-debug.log"""
    handlers.extend(filter(lambda x: len(x), os.environ.get("OPENAPI3DOC_LOGGING_HANDLERS", "").split(",")))

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "notimestamp": {
                "class": "logging.Formatter",
                "format": "%(name)-9s %(levelname)-4s %(message)s",
            },
            "detailed": {
                "class": "logging.Formatter",
                "format": "%(asctime)s %(name)-9s %(levelname)-4s %(message)s",
            },
            "plain": {
                "class": "logging.Formatter",
                "format": "%(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "plain",
            },
            "syslog": {
                "class": "logging.handlers.SysLogHandler",
                "level": "DEBUG",
                "formatter": "notimestamp",
                "address": "/dev/log",
                "facility": "user",
            },
            "debug": {
                "class": "logging.handlers.WatchedFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": "/tmp/openapi3doc-debug.log",
            },
        },
        "loggers": {
            "openapi3doc": {"level": "DEBUG", "handlers": handlers},
            "httpx": {"level": "DEBUG", "propagate": False, "handlers": handlers},
        },
    }

    unknown = frozenset(handlers) - frozenset(config["handlers"].keys())
    if unknown:
        raise ValueError(f"unknown logging handlers {sorted(unknown)}")

    # remove unused
    for i in frozenset(config["handlers"].keys()) - frozenset(handlers):
        del config["handlers"][i]

    for i in frozenset(config["formatters"]) - frozenset(map(lambda x: x["formatter"], config["handlers"].values())):
        del config["formatters"][i]

    logging.config.dictConfig(config)
