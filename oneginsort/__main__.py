"""Allow ``python -m oneginsort``."""

import sys

from .cli import main

sys.exit(main())
