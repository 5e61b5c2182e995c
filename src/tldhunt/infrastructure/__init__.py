"""Infrastructure layer — whois subprocess, output log, TLD list source.

This layer depends on stdlib and third-party libs (requests).
It must never import from services, commands, or output.
"""
