"""Small data-structure and algorithm routines: numbers, strings, patterns, stack operations, linked lists, queues and a bounded stack."""

__version__ = "0.1.0"
__all__ = ["numbers", "strings", "patterns", "stack_ops", "linked_list", "queues", "stack"]