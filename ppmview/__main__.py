"""Allows running the viewer with `python -m ppmview`."""
import sys

from ppmview.main import main

if __name__ == "__main__":
    sys.exit(main())
