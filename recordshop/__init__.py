"""Record shop inventory: REST API, client, validation and exports."""

__version__ = "1.0.0"
