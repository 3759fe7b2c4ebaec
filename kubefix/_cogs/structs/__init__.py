"""
Plain data structures passed between the resolvers, the clients, and the callers.

All the structures are purely declarative: no I/O happens on their creation.
"""
