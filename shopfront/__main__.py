"""Allow ``python -m shopfront``."""
import sys

from shopfront.cli.main import main

sys.exit(main())
