"""Allow ``python -m parsemath``."""

from parsemath.cli import main

if __name__ == "__main__":
    main()
