"""Abstractions layer: value types and map interfaces."""
