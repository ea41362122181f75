"""Service layer — result types, contracts, and operations returning ServiceResult.

Services may import from domain and infrastructure layers.
They must never import from routing, bot, commands, or output.
"""
