"""Library tests."""
