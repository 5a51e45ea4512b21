"""Notification persistence and rendering add-on.

Stores per-user notifications in a relational table and renders them into
text through a configurable template widget.
"""
