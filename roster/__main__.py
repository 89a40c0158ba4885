"""Allow ``python -m roster``."""
from roster.app import main

if __name__ == "__main__":
    main()
