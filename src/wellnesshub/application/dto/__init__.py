"""Data transfer objects exchanged between the API and the use cases."""
