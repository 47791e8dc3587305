import sys

from svglayout.cli import main

sys.exit(main())
