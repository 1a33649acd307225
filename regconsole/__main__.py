import sys

from regconsole.main import main

sys.exit(main())
