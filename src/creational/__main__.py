import sys

from creational.demos import main

sys.exit(main())
