"""CLI Shell — prompts, menu loop, and CSV source resolution.

Invariants:
    - The shell only calls the public MovieStore / Movie interface
    - All console IO goes through injectable input/output callables
"""
