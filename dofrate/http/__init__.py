#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# dofrate
from .client import HttpClient
from .log import DefaultLogger, LogEntry, Logger, NullLogger

#----------------------------------------------------------------------------------------------------------------------------------
