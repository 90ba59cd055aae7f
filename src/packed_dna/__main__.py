import sys

from .cmd import main

if __name__ == "__main__":
    sys.exit(main())
