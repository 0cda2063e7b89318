"""
supportbox
~~~~~~~~~~

Business-oriented helpers: working-day calendars and periods
(:mod:`supportbox.calendar`) and dict/list structure transforms
(:mod:`supportbox.structures`).
"""

from __future__ import annotations

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
