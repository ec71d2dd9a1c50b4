"""Presentation layer: command line interface and checker composition."""
