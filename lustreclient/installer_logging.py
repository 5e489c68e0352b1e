import datetime
import enum
import logging
import sys

# Define the custom log levels
CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
WARNING = logging.WARNING   # 30
SUCCESS = 25
INFO = logging.INFO         # 20
VERBOSE = 19
DEBUG = logging.DEBUG       # 10
NOTSET = logging.NOTSET

DEFAULT_STREAM_LOG_LEVEL = logging.INFO
DEFAULT_FILE_LOG_LEVEL = VERBOSE

custom_levels = {
    'SUCCESS': SUCCESS,
    'VERBOSE': VERBOSE,
}


# Custom colors for various logging levels
class COLORS(enum.Enum):
    red = "\033[0;31m"
    green = "\033[0;32m"
    yellow = "\033[0;33m"
    bred = "\033[1;31m"
    bgreen = "\033[1;32m"
    bblue = "\033[1;34m"
    normal = "\033[0m"


level_to_color_map = {
    ERROR: COLORS.bred,
    CRITICAL: COLORS.bred,
    WARNING: COLORS.yellow,
    SUCCESS: COLORS.bgreen,
    INFO: COLORS.normal,
    VERBOSE: COLORS.normal,
    DEBUG: COLORS.normal,
}


def get_level_color(level):
    return level_to_color_map.get(level, COLORS.normal).value


def log_level_factory(level_name):
    level_num = custom_levels.get(level_name, logging.NOTSET)

    def log_func(self, message, *args, **kwargs):
        if self.isEnabledFor(level_num):
            self._log(level_num, message, args, **kwargs)
    return log_func


class InstallerLogger(logging.Logger):
    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=3):
        # Calling super()._log() from the generated level methods makes findCaller() report this file instead
        #   of the caller, so the record is built here with a stacklevel that skips the wrapper frames.
        sinfo = None
        fn, lno, func, sinfo = self.findCaller(stack_info, stacklevel)
        if exc_info:
            if isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            elif not isinstance(exc_info, tuple):
                exc_info = sys.exc_info()

        record = self.makeRecord(self.name, level, fn, lno, msg, args, exc_info, func, extra, sinfo)
        self.handle(record)


# Add the custom levels to the logger
for custom_name, custom_num in custom_levels.items():
    logging.addLevelName(custom_num, custom_name)
    setattr(InstallerLogger, custom_name.lower(), log_level_factory(custom_name))


def _timestamp():
    return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')


class PlainFormatter(logging.Formatter):
    """Formats records as '<date> <time> - LEVEL - message' for the log file."""

    def format(self, record):
        line = f"{_timestamp()} - {record.levelname} - {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class ColoredStandardFormatter(logging.Formatter):
    def format(self, record):
        color = get_level_color(record.levelno)
        return f"{color}{_timestamp()} - {record.levelname} - {record.getMessage()}{COLORS['normal'].value}"


class ColoredDebugFormatter(logging.Formatter):
    def format(self, record):
        color = get_level_color(record.levelno)
        return f"{color}{_timestamp()} - {record.levelname}:{record.module}:{record.lineno} - " \
               f"{record.getMessage()}{COLORS['normal'].value}"


def setup_logging(name=__name__, stream_log_level=DEFAULT_STREAM_LOG_LEVEL, log_file=None,
                  file_log_level=DEFAULT_FILE_LOG_LEVEL):
    if isinstance(stream_log_level, str):
        stream_log_level = logging.getLevelName(stream_log_level.upper())

    _logger = InstallerLogger(name)
    _logger.setLevel(logging.DEBUG)

    # Console messages go to stdout
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(ColoredStandardFormatter())
    stream_handler.setLevel(stream_log_level)
    _logger.addHandler(stream_handler)

    if log_file:
        add_file_handler(_logger, log_file, file_log_level)

    return _logger


def add_file_handler(_logger, log_file, file_log_level=DEFAULT_FILE_LOG_LEVEL):
    for handler in _logger.handlers:
        if getattr(handler, 'baseFilename', None) and handler.baseFilename.endswith(str(log_file)):
            return handler

    file_handler = logging.FileHandler(log_file, mode='a')
    file_handler.setFormatter(PlainFormatter())
    file_handler.setLevel(file_log_level)
    _logger.addHandler(file_handler)
    return file_handler


def apply_logging_options(_logger, args):
    if args is None:
        return
    stream_handlers = [h for h in _logger.handlers if not hasattr(h, 'baseFilename')]
    file_handlers = [h for h in _logger.handlers if hasattr(h, 'baseFilename')]

    if hasattr(args, "stream_log_level") and args.stream_log_level:
        for stream_handler in stream_handlers:
            stream_handler.setLevel(args.stream_log_level.upper())

    if hasattr(args, "verbose") and args.verbose:
        for stream_handler in stream_handlers:
            if stream_handler.level > VERBOSE:
                stream_handler.setLevel(VERBOSE)

    if hasattr(args, "debug") and args.debug:
        for stream_handler in stream_handlers:
            stream_handler.setFormatter(ColoredDebugFormatter())
            if stream_handler.level > DEBUG:
                stream_handler.setLevel(DEBUG)
        for file_handler in file_handlers:
            file_handler.setLevel(DEBUG)
