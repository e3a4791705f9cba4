"""
Núcleo do cliente - configuração, logging e persistência do token.
"""
