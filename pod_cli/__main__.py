"""
Module execution entry point.

Allows running with: python -m pod_cli
"""

import sys
from pod_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
