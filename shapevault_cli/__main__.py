import sys

from shapevault_cli.cli import main

sys.exit(main())
