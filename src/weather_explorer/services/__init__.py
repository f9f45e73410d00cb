"""
Shared service utilities.

- http.py - requests session with a default timeout (no automatic retries)
"""
