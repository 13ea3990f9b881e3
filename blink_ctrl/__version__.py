#!/usr/bin/env python3

# Module information
__title__        = "blink_ctrl"
__description__  = "Encode blink(1) USB notification light commands into HID reports."
__version__      = '1.0.0'
__build__        = 0x010000
__author__       = 'Vivien Didelot'
__author_email__ = 'vivien.didelot@savoirfairelinux.com'
__license__      = "GPL-3.0-or-later"
__copyright__    = 'Copyright (C) 2013 Vivien Didelot'
