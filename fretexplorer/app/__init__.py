"""Application layer: selection state, summaries and tracing."""
