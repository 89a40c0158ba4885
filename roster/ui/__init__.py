"""Console input/output and presentation for the roster session."""
