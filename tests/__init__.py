"""Test package for the flight panel.

This package contains unit tests for the flight simulation, gauge geometry
and primitive builders, plus headless smoke tests for the pygame shell. The
smoke tests use pygame's dummy video driver to avoid opening real windows.
To run these tests, execute ``pytest`` from the project root.
"""
