#!/usr/bin/env python3

from .config import *
from .utils import *
from .rpc import *
from .gas import *
from .preflight import *
