"""Adapter reading atoms from PDB files with Biopython."""

import logging
import os
from typing import List

from Bio.PDB.PDBParser import PDBParser

from ...core.domain.models.atom import Atom

logger = logging.getLogger(__name__)


class PDBAtomReader:
    """Read the atoms of the first model of a PDB file."""

    def __init__(self):
        self._parser = PDBParser(QUIET=True)

    def read(self, file_path: str) -> List[Atom]:
        """
        Parse a PDB file into atoms indexed in file order.

        Args:
            file_path: Path to the PDB file

        Returns:
            Atoms of the first model

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"PDB file not found: {file_path}")

        structure_id = os.path.splitext(os.path.basename(file_path))[0]
        structure = self._parser.get_structure(structure_id, file_path)
        model = next(structure.get_models(), None)
        if model is None:
            return []

        atoms = [
            Atom(index=index, element=_element(pdb_atom), coordinates=pdb_atom.get_coord())
            for index, pdb_atom in enumerate(model.get_atoms())
        ]
        logger.info("Read %d atoms from %s", len(atoms), file_path)
        return atoms


def _element(pdb_atom) -> str:
    """Element symbol, falling back to the leading letters of the atom name."""
    element = (pdb_atom.element or "").strip()
    if element and element != "X":
        return element
    letters = "".join(ch for ch in pdb_atom.get_name() if ch.isalpha())
    return letters[:2] if len(letters) > 1 and letters[1].islower() else letters[:1]
