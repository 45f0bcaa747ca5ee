import sys
from wikilsa.main import main

sys.exit(main())
