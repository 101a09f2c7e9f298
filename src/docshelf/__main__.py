import sys

from docshelf.cli import main

sys.exit(main())
