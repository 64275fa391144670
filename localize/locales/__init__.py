#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Locales package for Localize.

This package holds the packaged translation resource files (YAML), one per
language. The i18n code lives in localize/core.
"""

from pathlib import Path

LOCALES_DIR = Path(__file__).resolve().parent

__all__ = ['LOCALES_DIR']
