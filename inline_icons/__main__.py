import sys

from inline_icons.cli import main

sys.exit(main())
