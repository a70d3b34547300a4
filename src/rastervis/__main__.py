"""
Run with: python -m rastervis
"""
import sys

from rastervis.main import main

if __name__ == "__main__":
    sys.exit(main())
