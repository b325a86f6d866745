import sys

from reelcraft.main import main

sys.exit(main())
