"""Maintenance scripts: catalog upload and retagging."""
