"""Infrastructure layer — version extractors and the in-memory asset tree."""
