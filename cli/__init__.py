"""Command-line entry points for Hobby Tracker."""
