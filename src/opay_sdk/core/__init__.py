"""Provider-independent pieces: endpoint registry and error types."""
