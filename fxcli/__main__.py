import sys

from fxcli.main import main

sys.exit(main())
