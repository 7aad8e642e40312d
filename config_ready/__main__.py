import sys

from config_ready.cli import main

sys.exit(main())
