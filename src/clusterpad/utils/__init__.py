"""Utility functions and tools used across the clusterpad package.

- `logger`: Logging configuration shared by every module
"""
