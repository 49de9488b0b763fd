"""Command line interface for Crazy Eights."""
