"""Allow running categree as ``python -m categree``."""

import sys

from categree.cli import main

sys.exit(main())
