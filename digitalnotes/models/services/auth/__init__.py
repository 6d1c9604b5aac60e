"""Pydantic models for the auth endpoints."""
