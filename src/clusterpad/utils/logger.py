"""Defines the package logger and the format of its messages."""

import logging
import sys

# Bare messages on stdout, as the CLI prints label tables through the logger
logging.basicConfig(format="%(message)s", stream=sys.stdout)

# Route warnings (e.g. skipped configuration removals) through logging
logging.captureWarnings(True)

logger = logging.getLogger("clusterpad")
