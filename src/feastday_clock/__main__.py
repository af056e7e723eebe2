"""Allow ``python -m feastday_clock``."""

import sys

from feastday_clock.cli import main

sys.exit(main())
