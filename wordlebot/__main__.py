#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Run as: python3 -m wordlebot [options] [command]"""
import sys
from .player import main

sys.exit(main())
