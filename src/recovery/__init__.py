"""Front-end pieces around the decoders: CLI and lookup log."""
