import sys

from samlisp.cli import main

sys.exit(main())
