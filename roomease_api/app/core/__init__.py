"""Settings, logging, security, errors and database helpers."""
