#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# dofrate
from .config import DEFAULT_CONFIG, RateConfig
from .dates import parse_pub_date
from .datastructures import RateReading, UpdateResult
from .exceptions import ConfigurationError, DateParseError, DofRateException, ExtractionError, FetchError
from .extractor import extract_rate, find_field, find_item
from .floor import FloorDecision, apply_floor, to_price
from .http import HttpClient
from .scheduler import UpdateScheduler
from .server import create_app
from .store import MemoryStore, ShelfStore, Store, load_reading, save_reading
from .updater import RateUpdater
from .version import DOFRATE_VERSION

__version__ = DOFRATE_VERSION

#----------------------------------------------------------------------------------------------------------------------------------
