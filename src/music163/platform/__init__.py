"""Cross-cutting infrastructure shared by the client and the CLI."""
