"""Calcula el número faltante de un arreglo con n enteros distintos en [0, n]."""

__version__ = "0.1.0"
