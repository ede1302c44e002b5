"""Allow ``python -m wp_package_details``."""

from .cli import main

if __name__ == "__main__":
    main()
