import sys

from retail_fixtures.cli import main

sys.exit(main())
