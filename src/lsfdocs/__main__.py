"""lsfdocs executable module.

Error handling lives in cli.main(); this module only delegates to it so that
`python -m lsfdocs` and the installed `lsfdocs` script share one code path.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
