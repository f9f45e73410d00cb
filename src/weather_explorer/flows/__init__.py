"""Prefect flows.

- refresh.py - fetch weather for the favorite cities and render the static site
"""
