# maze_solver/utils/logger_config.py
import logging
import os
from logging.handlers import RotatingFileHandler

GENERAL_LOG_FILE = 'general.log'
SOLVER_LOG_FILE = 'solver_details.log'


class SolveTimeFormatter(logging.Formatter):
    """Renders solve-run records as '[12 ms] message', others as '[LEVEL] message'."""

    def format(self, record):
        if hasattr(record, 'elapsed_ms'):
            return f"[{record.elapsed_ms} ms] {record.getMessage()}"
        return f"[{record.levelname}] {record.getMessage()}"


def _rotating_handler(log_dir, filename, level, formatter, max_mb, backups):
    handler = RotatingFileHandler(os.path.join(log_dir, filename), maxBytes=max_mb*1024*1024, backupCount=backups)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_level=logging.INFO, log_dir="logs", file_logging=True):
    """
    Configure console and file logging for a solver run.

    Loading, config and CLI messages go through the root logger: console at
    `log_level`, plus `general.log` at INFO. Messages from the 'solver' logger
    tree (solve results, search counts) are kept off the root console and get
    their own console handler with the elapsed-time format, plus
    `solver_details.log` at DEBUG for records stamped by a SolverLoggerAdapter.

    Args:
        log_level (int): Console level for both streams.
        log_dir (str): Directory for the rotating log files; created on demand.
        file_logging (bool): Set False to log to the console only.
    """
    if file_logging:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    console_handler.addFilter(lambda record: not record.name.startswith('solver'))
    root_logger.addHandler(console_handler)

    if file_logging:
        root_logger.addHandler(_rotating_handler(
            log_dir, GENERAL_LOG_FILE, logging.INFO,
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
            max_mb=5, backups=3,
        ))

    solver_logger = logging.getLogger('solver')
    solver_logger.setLevel(logging.DEBUG)
    solver_logger.propagate = False
    solver_logger.handlers.clear()

    solver_console_handler = logging.StreamHandler()
    solver_console_handler.setLevel(log_level)
    solver_console_handler.setFormatter(SolveTimeFormatter())
    solver_logger.addHandler(solver_console_handler)

    if file_logging:
        details_handler = _rotating_handler(
            log_dir, SOLVER_LOG_FILE, logging.DEBUG,
            logging.Formatter('%(asctime)s - %(levelname)s - [%(elapsed_ms)6d ms] - %(name)s - %(message)s'),
            max_mb=10, backups=5,
        )
        # The format string needs elapsed_ms
        details_handler.addFilter(lambda record: hasattr(record, 'elapsed_ms'))
        solver_logger.addHandler(details_handler)


class SolverLoggerAdapter(logging.LoggerAdapter):
    """Stamps every record with the elapsed milliseconds of the run's Stopwatch."""

    def process(self, msg, kwargs):
        if 'stopwatch' in self.extra:
            kwargs['extra'] = {'elapsed_ms': self.extra['stopwatch'].elapsed_ms()}
        return msg, kwargs


def get_solver_logger(stopwatch, name='solver'):
    """Return a SolverLoggerAdapter for `name` (a 'solver.*' logger) bound to `stopwatch`."""
    return SolverLoggerAdapter(logging.getLogger(name), {'stopwatch': stopwatch})
