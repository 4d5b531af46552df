"""Tree topologies and tree-tensor-network site tensors."""

__version__ = "1.0.0"
__all__ = ["topology", "site"]