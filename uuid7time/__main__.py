import sys

from uuid7time.main import main

sys.exit(main())
