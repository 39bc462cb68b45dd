"""Playlist consumers - matching, consolidation and ordering."""
