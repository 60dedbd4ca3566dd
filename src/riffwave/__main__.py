import sys

from riffwave.cli import main

sys.exit(main())
