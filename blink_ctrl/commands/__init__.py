#!/usr/bin/env python3

from . import common
from . import fade_color
from . import play
from . import server_down
from . import set_color
from . import set_pattern
