import sys
import logging
from logging.handlers import SysLogHandler
import settings

# All modules under `pwpolicy/` log with this logger.
logger = logging.getLogger('pwpolicy')

# Set log level.
_log_level = getattr(logging, str(settings.log_level).upper())
logger.setLevel(_log_level)


def _get_handler():
    """Log to stdout if program runs with `--foreground`, otherwise syslog."""
    if '--foreground' in sys.argv:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
        return handler

    if settings.SYSLOG_SERVER.startswith('/'):
        # Log to a local socket
        server = settings.SYSLOG_SERVER
    else:
        # Log to a network address
        server = (settings.SYSLOG_SERVER, settings.SYSLOG_PORT)

    handler = SysLogHandler(address=server, facility=settings.SYSLOG_FACILITY)
    handler.setFormatter(logging.Formatter('%(name)s %(message)s'))
    return handler


logger.addHandler(_get_handler())
