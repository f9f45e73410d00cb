"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, error type
    └── {feature}.py      # Fetch functions (one per endpoint)

Fetch functions return the raw JSON dict; mapping onto ``WeatherRecord``
happens in ``weather_explorer.normalize``.
"""
