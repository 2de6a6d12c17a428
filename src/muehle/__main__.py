"""``python -m muehle`` — terminal game."""

import sys

from muehle.cli import main

sys.exit(main())
