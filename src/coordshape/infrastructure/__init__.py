"""Infrastructure: bundled reference catalog and file adapters."""
