import sys

from aoai_cli.cli import main

sys.exit(main())
