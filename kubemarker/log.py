import logging
import sys

import click

STDOUT_LOG_LEVELS = (logging.DEBUG, logging.INFO)
STDERR_LOG_LEVELS = (logging.WARNING, logging.ERROR, logging.CRITICAL)


logger = logging.getLogger('kubemarker')


class LogFilter(logging.Filter):
    def __init__(self, *levels):
        super(LogFilter, self).__init__()
        self.levels = levels

    def filter(self, record):
        return record.levelno in self.levels


class LogFormatter(logging.Formatter):
    level_to_format = {
        logging.DEBUG: lambda s: click.style(s, 'green'),
        logging.WARNING: lambda s: click.style(s, 'yellow'),
        logging.ERROR: lambda s: click.style(s, 'red'),
        logging.CRITICAL: lambda s: click.style(s, 'red', bold=True),
    }

    def format(self, record):
        if not isinstance(record.msg, str):
            return super(LogFormatter, self).format(record)

        message = record.getMessage()
        style = self.level_to_format.get(record.levelno)
        return style(message) if style else message


def setup_logging(debug=False):
    log_level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(log_level)

    # Repeated CLI invocations in one process (tests) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(LogFilter(*STDOUT_LOG_LEVELS))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(LogFilter(*STDERR_LOG_LEVELS))

    formatter = LogFormatter()
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    logger.debug('Log level: {0}'.format(logging.getLevelName(log_level)))
