"""Adapters exposing notifications to the outside world."""
