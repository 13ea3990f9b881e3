#!/usr/bin/env python3

from . import arguments
from . import colors
from . import commands
from . import duration
from . import output
from . import utils
from .__version__ import __version__
