"""Entry point for running the CLI directly.

Usage:
    python -m catalog_i18n -r resources lookup greeting
"""

from catalog_i18n.main import main

if __name__ == "__main__":
    main()
