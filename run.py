"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line interface straight from a source checkout.

It is located outside the 'src' package and puts 'src' on 'sys.path' so that
'from morpheus...' resolves without installing the package.

Usage:
    $ python run.py [matrix|add-scale|norm|all] [--seed N] [-v]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from morpheus.main import main

if __name__ == "__main__":
    sys.exit(main())
