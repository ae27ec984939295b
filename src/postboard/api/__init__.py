"""HTTP adapter for the Postboard service."""
