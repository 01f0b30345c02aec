"""
Casos de uso del seguimiento de evaluaciones.
"""
