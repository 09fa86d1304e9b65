"""Allow running gitstamp with ``python -m gitstamp``."""

import sys

from gitstamp.cli import main

sys.exit(main())
