import sys

from service_monitor.main import main

sys.exit(main())
