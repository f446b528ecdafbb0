"""Run with: python -m id3tree [CSV] --target COLUMN"""

import sys

from id3tree.session import main

if __name__ == "__main__":
    sys.exit(main())
