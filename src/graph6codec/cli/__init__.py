"""Command line interface for graph6codec."""
