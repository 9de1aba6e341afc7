"""Validators for written reports."""
