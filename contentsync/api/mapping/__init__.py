"""Mapping domain: sync mappings, ownership and source-to-target path mapping."""
