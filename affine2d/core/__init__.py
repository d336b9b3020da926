"""
Core geometry kernel: value types, numerical primitives, snapshots and contracts.

Nothing in here performs I/O or holds process-wide state; every module can be
used without a drawing surface or a configured logging sink.
"""
