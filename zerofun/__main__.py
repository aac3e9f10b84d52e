import sys

from zerofun.cli import main

sys.exit(main())
