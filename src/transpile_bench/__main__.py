import sys

from transpile_bench.cli import main

sys.exit(main())
