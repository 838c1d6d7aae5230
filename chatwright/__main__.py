"""Module entry point.

Invokes the CLI main function when the package is executed
directly with python -m chatwright.
"""

import sys

from chatwright.cli import main

if __name__ == '__main__':
    sys.exit(main())
