"""
Core building blocks shared by both services: settings, logging,
error handling and record storage.
"""
