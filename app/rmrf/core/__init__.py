"""Core configuration, paths and theming for rmrf."""
