"""Core of parsemath: tokenizer, parser, evaluator and their support types."""
