"""Salah Times - Namaz vakitleri ve cemaat (Jamaat) saatleri hesaplama."""

__version__ = "0.1.0"
