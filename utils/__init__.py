"""
Utilities for digestkit: configuration, logging and the host boundary adapter.
"""
