"""
Global constants used throughout the project
"""
import logging

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(levelname)s | %(message)s"

# Logs every component and simple point found by the demo
DEBUG = False

# Side of the square domain used by the demo
DEMO_DOMAIN_SIZE = 8

# Number of (topology, neighborhood configuration) pairs whose simple point
# answer is remembered
SIMPLE_CONFIGURATION_CACHE_SIZE = 2**16
