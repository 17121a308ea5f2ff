"""Allow running scm-prompt with `python -m scm_prompt`."""

import sys

from scm_prompt.cli.main import main

sys.exit(main())
