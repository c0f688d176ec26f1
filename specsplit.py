#!/usr/bin/env python3

import sys

from specsplit.main import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
