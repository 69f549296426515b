"""Entry point for ``python -m uriforge``."""

import sys

from .cli import main

sys.exit(main())
