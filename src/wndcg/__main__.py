import sys

from wndcg.main_orchestrator import main

sys.exit(main())
