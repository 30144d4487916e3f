# record_export/__main__.py

"""Entry point for ``python -m record_export``"""

# Local imports
from record_export.adapters.cli.main import main

if __name__ == "__main__":
    main()
