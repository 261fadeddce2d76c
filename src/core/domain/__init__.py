"""Modelos y entidades del dominio.

Por qué:
- Estructuras de datos simples y estrictas (Pydantic v2) y las clases de los ejemplos.
- El dominio no sabe nada de la CLI, los exportadores ni las pasarelas.
"""
