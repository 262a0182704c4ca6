#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------

DOFRATE_VERSION = '0.1.0'

dofrate_version = DOFRATE_VERSION

#----------------------------------------------------------------------------------------------------------------------------------
