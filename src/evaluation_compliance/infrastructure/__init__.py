"""
Infrastructure - Adaptadores de configuración y logging.
"""
