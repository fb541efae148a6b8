"""CLI commands for date_slider.

Commands:
- picker: options, validate and browse
- config: Picker settings management
"""
