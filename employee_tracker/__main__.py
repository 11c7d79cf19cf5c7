import sys
from employee_tracker.app import main

sys.exit(main())
