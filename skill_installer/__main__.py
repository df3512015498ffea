import sys

from skill_installer.cli import main

if __name__ == "__main__":
    sys.exit(main())
