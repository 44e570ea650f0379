import sys

from polytriang.cli import main

sys.exit(main())
