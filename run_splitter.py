#!/usr/bin/env python
"""
FNT Splitter - Standalone entry point for PyInstaller.
"""
import sys

from fnt_splitter.main import main

if __name__ == "__main__":
    sys.exit(main())
