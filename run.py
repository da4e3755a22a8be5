"""
Entry Point Script (Bootstrap)
==============================
Development runner for the command-line renderer.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so 'from sparkchart...' resolves without installing.

Usage:
    $ python run.py 12 10 14 9 11 15 18 13 --smooth -o spark.png
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from sparkchart.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
