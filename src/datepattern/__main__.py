"""Allow ``python -m datepattern``."""

import sys

from datepattern.cli import main

sys.exit(main())
