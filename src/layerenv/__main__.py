import sys

from layerenv.cli import main

sys.exit(main())
