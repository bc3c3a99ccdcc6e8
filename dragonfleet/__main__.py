import sys

from dragonfleet.cli.repl import main

sys.exit(main())
