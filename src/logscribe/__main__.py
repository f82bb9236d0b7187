import sys

from logscribe.interface.cli.app import main

sys.exit(main())
