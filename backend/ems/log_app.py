import logging
import os
from django.conf import settings

LOG_DIR = settings.LOG_DIR
os.makedirs(LOG_DIR, exist_ok=True)

formatter = logging.Formatter(
    "%(levelname)s | %(asctime)s | %(name)s | %(message)s"
)


def _file_handler(filename, level):
    handler = logging.FileHandler(os.path.join(LOG_DIR, filename))
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)

loggers = logging.getLogger("ems_logger")
loggers.setLevel(logging.INFO)

if not loggers.handlers:
    loggers.addHandler(_file_handler("info.log", logging.INFO))
    loggers.addHandler(_file_handler("warning.log", logging.WARNING))
    loggers.addHandler(_file_handler("error.log", logging.ERROR))
    loggers.addHandler(console_handler)

loggers.propagate = False
