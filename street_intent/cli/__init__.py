"""Command-line interface for trying out and tuning the classifier."""
