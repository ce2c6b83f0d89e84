"""Core value models for photoprint."""
