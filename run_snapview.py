#!/usr/bin/env python3
"""
SnapView launcher script.

Run this from the project root to start the SnapView demo.
"""

import sys
from pathlib import Path

# Make the snapview package importable without installing it
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

if __name__ == '__main__':
    from snapview.run_gui import main
    sys.exit(main())
