import sys

from cinder.cli import main

sys.exit(main())
