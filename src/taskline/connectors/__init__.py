"""Console REPL and presenter."""
