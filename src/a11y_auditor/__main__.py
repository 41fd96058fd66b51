import sys

from a11y_auditor.cli import main

sys.exit(main())
