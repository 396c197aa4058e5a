"""Allow ``python -m autocomplete_matcher``."""

import sys

from .cli import main

sys.exit(main())
