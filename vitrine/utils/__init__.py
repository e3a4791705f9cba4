"""
Funções puras de formatação e validação.
"""
