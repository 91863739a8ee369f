"""Logging for ganteng.

Library modules log through LOGGER only; handlers are configured by the
application entry points.
"""

import logging

LOGGER = logging.getLogger("ganteng")
