"""User-facing front ends built on the public client API."""
