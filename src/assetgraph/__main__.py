"""Allow ``python -m assetgraph``."""

import sys

from assetgraph.cli import main

sys.exit(main())
