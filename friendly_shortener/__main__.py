import sys

from friendly_shortener.cli import main

sys.exit(main())
