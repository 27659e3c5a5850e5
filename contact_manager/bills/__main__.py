"""Allow `python -m contact_manager.bills`."""

import sys

from contact_manager.bills.menu import main

sys.exit(main())
