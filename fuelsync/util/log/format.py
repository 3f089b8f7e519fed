import logging


_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord('', logging.INFO, '', 0, '', (), None).__dict__
) | {'message', 'asctime', 'taskName'}


class TextFormatter(logging.Formatter):
    """`HH:MM:SS LEVEL logger message key=value...`, followed by the traceback if any"""

    LEVEL_NAMES = {
        logging.WARNING: 'WARN',
        logging.CRITICAL: 'FATAL',
    }

    def __init__(self, colors: bool = False):
        super().__init__(datefmt='%H:%M:%S')
        self.colors = colors

    def format(self, rec: logging.LogRecord) -> str:
        level = self.LEVEL_NAMES.get(rec.levelno, rec.levelname).ljust(5)
        name = rec.name
        extra = ''.join(
            f' {k}={v!r}' for k, v in rec.__dict__.items() if k not in _RECORD_ATTRIBUTES
        )
        if self.colors:
            level = f'\033[1m{level}\033[0m'
            name = f'\033[34m{name}\033[0m'
            extra = extra and f'\033[2m{extra}\033[0m'

        line = f'{self.formatTime(rec, self.datefmt)} {level} {name} {rec.getMessage()}{extra}'
        if rec.exc_info:
            line += '\n' + self.formatException(rec.exc_info)
        return line
