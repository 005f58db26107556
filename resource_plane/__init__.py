"""
Resource Plane: capa de traducción entre la API de gestión y las entidades del backend.
"""

__version__ = "1.0.0"
