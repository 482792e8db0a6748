"""
Main entry point for running the Migration engine.

Usage:
    python -m migration_engine.protocol
"""

from migration_engine.protocol.interface import main

if __name__ == "__main__":
    main()
