"""
Punto de entrada: python -m resource_plane
"""

from resource_plane.cli.app import app

if __name__ == "__main__":
    app()
