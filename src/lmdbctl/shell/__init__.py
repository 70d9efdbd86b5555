"""Console core — tokenizer, resolver, session context, and REPL loop."""
