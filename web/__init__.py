"""HTTP endpoint for export-finished events."""
