"""Command-line entry points for rendering the station map."""
