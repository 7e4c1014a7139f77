"""Test package initialisation.

The admission desk is laid out as several top-level packages (``models``,
``services``, ``notifications``...) rather than a single installable
package, so the repository root is appended to ``sys.path`` here to keep the
imports working when the tests run without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
