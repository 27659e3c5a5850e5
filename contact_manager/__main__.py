"""Allow `python -m contact_manager`."""

import sys

from contact_manager.cli import main

sys.exit(main())
