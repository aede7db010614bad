"""Entry point for ``python -m src.user_registry``."""

from src.user_registry.cli import main

if __name__ == "__main__":
    main()
