"""
Pytest Configuration
====================

Ensures the project root is importable when the package is not installed.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
