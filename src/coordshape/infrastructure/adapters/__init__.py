"""Adapters for external libraries and file formats."""

from .pdb_adapter import PDBAtomReader

__all__ = ["PDBAtomReader"]
