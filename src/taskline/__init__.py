"""
taskline: a line-oriented console task manager.

Components:
- tasks/: task models (Todo, Deadline, Event) and the in-memory TaskStore
- core/: tokenizer, error taxonomy, outcomes and session state
- cli/: command registry, bootstrap and the `taskline` entrypoint
- connectors/: console REPL and presenter
"""
