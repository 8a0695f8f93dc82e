import sys

from git_recent.cli import main

sys.exit(main())
