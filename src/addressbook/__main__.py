import sys

from addressbook.cli import main

if __name__ == "__main__":
    sys.exit(main())
