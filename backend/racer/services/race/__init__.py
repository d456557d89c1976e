"""Race domain services: track layout, registry, leaderboard, session and timers.

This package holds the authoritative game logic. Socket handlers and HTTP
routes call into it; it never touches the transport directly and only
reports outbound events through the emit callable it was built with.
"""
