"""python -m src.cli"""

import sys

from src.cli.app import main

sys.exit(main())
