"""Traversal sources producing filesystem entries for the tree renderer.

Two sources are provided. ``DirectorySource`` lists directories on demand so the
renderer can recurse with full sibling lookahead. ``IgnoreWalker`` yields a flat
pre-order stream of entries already pruned of hidden and gitignored paths.
"""
