import sys

from sgf2gif.cli import main

sys.exit(main())
