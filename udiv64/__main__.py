import sys

from .div import main

sys.exit(main())
