"""Hobby Tracker: session analytics over an in-memory hobby log."""
