"""Text adventure used to exercise the world model.

Peripheral to the modeling core: a line-based command grammar, a small
world, and a synchronous read-eval-print loop.
"""
