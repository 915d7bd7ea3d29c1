"""
Test suite for visn.

Focus areas:
- In-order and reordered resolution
- Fallible short-circuit
- Prologue / epilogue phases
- Exploration across orderings
"""
