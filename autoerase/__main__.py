import sys

from autoerase.main import main

sys.exit(main())
