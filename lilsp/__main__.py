import sys

from lilsp.repl import main

sys.exit(main())
