"""Infrastructure layer - providers, codecs, configuration."""
