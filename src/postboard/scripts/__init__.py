"""Operational scripts for the Postboard service."""
