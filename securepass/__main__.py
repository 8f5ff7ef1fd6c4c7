"""
SecurePass Module Entry Point
==============================

Allows running the SecurePass CLI via: python -m securepass
"""

from securepass.cli import main

if __name__ == "__main__":
    main()
