"""Allow ``python -m pwtool``."""

import sys

from pwtool.cli import main

sys.exit(main())
