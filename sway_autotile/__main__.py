import sys

from sway_autotile.run import main

sys.exit(main())
