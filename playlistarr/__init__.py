"""Playlistarr - sports playlist enhancer for M3U files."""
