"""HTTP access to the generated artifacts."""
