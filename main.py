#!/bin/env python

import os
import sys

from generate_html_indexes import generate


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) > 1:
        print("Usage: python main.py [root_dir]")
        sys.exit(1)

    # Defaults to the current directory
    root = os.path.abspath(argv[0] if argv else os.getcwd())
    generate(root)
    print("index.html generated (including root tree).")


if __name__ == "__main__":
    main()
