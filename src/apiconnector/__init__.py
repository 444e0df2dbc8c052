"""Sequential TCP/HTTP connectivity checks for named services."""
