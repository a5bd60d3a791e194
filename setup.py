# -*- coding: utf-8 -*-
"""The setup script."""
from setuptools import setup

# See setup.cfg for all options
setup()
