"""Allow ``python -m buildvars``."""

import sys

from buildvars.interface.cli import main

if __name__ == "__main__":
    sys.exit(main())
