"""Pre-build validation of a web application's Supabase environment file."""

__version__ = "0.1.0"
