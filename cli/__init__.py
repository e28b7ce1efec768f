"""
combinekit CLI - reducer composition checks

Commands:
- combinekit check - Compose a reducer map and run the init dispatch
- combinekit replay - Replay a JSONL action file through a reducer
- combinekit version - Show version information
"""

__version__ = "0.1.0"
