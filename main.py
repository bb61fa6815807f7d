"""Application entry point for PublicSuffix.

Parses command line arguments, initializes logging and prints the
decomposition of each target.
"""

import sys

from publicsuffix.cli import main

if __name__ == "__main__":
    sys.exit(main())
