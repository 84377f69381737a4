import sys

from shamirsolve.cli import main

sys.exit(main())
