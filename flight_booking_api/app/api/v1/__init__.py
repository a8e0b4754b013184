"""
Version 1 of the user and flight APIs.
"""
