"""
Configuration package: settings, credential pool and constants.
"""
