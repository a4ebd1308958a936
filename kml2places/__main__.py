"""Allow ``python -m kml2places``."""

import sys

from kml2places.cli import main

sys.exit(main())
