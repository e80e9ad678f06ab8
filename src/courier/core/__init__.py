"""Core cross-cutting components: correlation, security and configuration."""
