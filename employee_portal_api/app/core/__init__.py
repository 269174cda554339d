"""Configuration, logging, error handling and seed data."""
