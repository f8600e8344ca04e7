import sys

from epicboard.cli import main

sys.exit(main())
