"""Allow ``python -m projectpilot``."""

import sys

from projectpilot.cli import main

sys.exit(main())
