"""Allow running as ``python -m playlistarr``."""

import sys

from playlistarr.cli import main

sys.exit(main())
