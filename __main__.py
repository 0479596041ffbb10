"""CLI entry point for visual-builder.

Run with ``python .`` from the repository root, or through the
installed ``visual-builder`` script.
"""

import sys

from visual_builder.cli import main

if __name__ == "__main__":
    sys.exit(main())
