"""Core infrastructure: paths, configuration, theming and progress types."""
