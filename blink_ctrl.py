#!/usr/bin/env python3

# Import modules
import sys
from blink_ctrl.main import main

# Run main() if run as script
if __name__ == '__main__':
    sys.exit(main())
