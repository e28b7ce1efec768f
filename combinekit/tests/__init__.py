"""
Test suite for combinekit.

Focus areas:
- Composite reducer results and referential equality
- Construction-time shape assertions
- Runtime shape warnings and their deduplication
- Reference store and replay
- CLI
"""
