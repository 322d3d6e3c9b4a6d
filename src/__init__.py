"""Application Layer.

Infrastructure adapters that turn collaborator data into domain Value
Objects. This layer handles translation only; the domain stays pure.
"""
