#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Execução direta (ex.: `python main.py` no comando de build do site)."""

import sys

from yt_catalog.cli import main

if __name__ == "__main__":
    sys.exit(main())
