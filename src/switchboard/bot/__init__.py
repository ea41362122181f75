"""Bot layer — leaf command modules and the message interpreter.

The bot layer wires routing modules to the store. It may import from
domain, services and routing, never from commands or output.
"""
