"""Command-line interface for reading the CPU temperature."""
