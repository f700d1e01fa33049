"""Configuration, logging, persistence and result helpers."""
