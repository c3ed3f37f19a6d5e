"""Library used by other scripts under tools/ directory."""

import os
import sys
import logging

os.environ['LC_ALL'] = 'C'

rootdir = os.path.abspath(os.path.dirname(__file__)) + '/../'
sys.path.insert(0, rootdir)

import settings

# logging
logger = logging.getLogger('pwpolicy-cmd')
_ch = logging.StreamHandler(sys.stdout)
_formatter = logging.Formatter('%(message)s')
_ch.setFormatter(_formatter)
logger.addHandler(_ch)

_log_level = getattr(logging, str(settings.log_level).upper())
logger.setLevel(_log_level)


def yes_no(v):
    return 'yes' if v else 'no'
