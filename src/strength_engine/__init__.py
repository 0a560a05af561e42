"""Event-sourced workout tracking and set prescription."""
