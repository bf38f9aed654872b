"""
Root conftest.py - Sets up Python path for tests.

Lets the suite import ``vibrant`` from a source checkout without installing it.
"""
import sys
import os

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
