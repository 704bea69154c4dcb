import logging
import string
from enum import Enum
from types import MappingProxyType

from pyteomics.auxiliary import PyteomicsError

from . import aminoacids


class EnzymeError(PyteomicsError):
    """Invalid enzyme definition or invalid input to an enzyme operation."""
    pass


class Terminus(Enum):
    N_TERMINUS = 'N'
    C_TERMINUS = 'C'


class Enzyme:
    """A proteolytic enzyme: the residues it cleaves and the peptide
    terminus the cleavage produces.

    Parameters
    ----------
    name : str
        Enzyme name.
    residues : str
        Cleavable residues, uppercase one-letter codes.
    terminus : Terminus
        :py:attr:`Terminus.C_TERMINUS` if the enzyme cleaves after the residue
        (peptides end with it), :py:attr:`Terminus.N_TERMINUS` if it cleaves
        before the residue (peptides start with it).
    peptide_cleavage_efficiency : float, optional
        Probability that a peptide generated by the enzyme follows the
        cleavage rule, e.g. for trypsin the probability that a peptide
        ends with K or R.
    neighboring_aa_cleavage_efficiency : float, optional
        Probability that the neighboring amino acid outside the peptide
        follows the rule, e.g. for trypsin the probability that the
        preceding residue is K or R.
    """

    def __init__(self, name, residues, terminus,
                 peptide_cleavage_efficiency=0.0, neighboring_aa_cleavage_efficiency=0.0):
        residues = ''.join(residues)
        if not residues:
            raise EnzymeError('Enzyme {} has no cleavable residues'.format(name))
        for residue in residues:
            if residue not in string.ascii_uppercase:
                raise EnzymeError('Enzyme residues must be upper case: {}'.format(residue))
        try:
            self._terminus = Terminus(terminus)
        except ValueError:
            raise EnzymeError('Invalid terminus for enzyme {}: {!r}'.format(name, terminus))
        self._name = name
        self._residues = residues
        self._cleavable = frozenset(residues)
        self._peptide_cleavage_efficiency = self._check_efficiency(peptide_cleavage_efficiency)
        self._neighboring_aa_cleavage_efficiency = self._check_efficiency(
                neighboring_aa_cleavage_efficiency)

    @staticmethod
    def _check_efficiency(value):
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise EnzymeError('Cleavage efficiency must be within [0, 1]: {}'.format(value))
        return value

    @property
    def name(self):
        return self._name

    @property
    def residues(self):
        return self._residues

    @property
    def cleavable_residues(self):
        return self._cleavable

    @property
    def terminus(self):
        return self._terminus

    @property
    def is_n_term(self):
        return self._terminus is Terminus.N_TERMINUS

    @property
    def is_c_term(self):
        return self._terminus is Terminus.C_TERMINUS

    @property
    def peptide_cleavage_efficiency(self):
        return self._peptide_cleavage_efficiency

    @property
    def neighboring_aa_cleavage_efficiency(self):
        return self._neighboring_aa_cleavage_efficiency

    def with_efficiencies(self, peptide_cleavage_efficiency=None,
                          neighboring_aa_cleavage_efficiency=None):
        """Return a copy of the enzyme with the given efficiencies replaced."""
        if peptide_cleavage_efficiency is None:
            peptide_cleavage_efficiency = self._peptide_cleavage_efficiency
        if neighboring_aa_cleavage_efficiency is None:
            neighboring_aa_cleavage_efficiency = self._neighboring_aa_cleavage_efficiency
        return Enzyme(self._name, self._residues, self._terminus,
                      peptide_cleavage_efficiency, neighboring_aa_cleavage_efficiency)

    def is_cleavable(self, residue):
        """Check if a residue is cleaved by the enzyme.

        Parameters
        ----------
        residue : str or AminoAcid
            One-letter code, or an amino acid whose unmodified residue is
            checked.
        """
        if isinstance(residue, aminoacids.AminoAcid):
            residue = residue.residue
        return residue in self._cleavable

    def is_cleaved(self, peptide):
        """Check if the terminus of `peptide` on the enzyme's side is
        cleavable. A modified terminal residue does not match.

        Parameters
        ----------
        peptide : Peptide or str
            A string is parsed with the standard amino acid set.
        """
        if isinstance(peptide, str):
            peptide = aminoacids.standard.get_peptide(peptide) if peptide else ()
        if not peptide:
            raise EnzymeError('Cannot check cleavage of an empty peptide')
        aa = peptide[0] if self.is_n_term else peptide[-1]
        return self.is_cleavable(aa.label)

    def get_num_cleaved_termini(self, annotation, aa_set=None):
        """Count the peptide termini consistent with the cleavage rule.

        Parameters
        ----------
        annotation : str
            Peptide with its flanking residues, e.g. ``'K.DLFGEK.I'``.
            A flanking character unknown to `aa_set` (like ``'-'``) marks
            the protein terminus and always counts as cleaved.
        aa_set : AminoAcidSet, optional
            Defaults to the standard set.

        Returns
        -------
        int
            0, 1 or 2.
        """
        if aa_set is None:
            aa_set = aminoacids.standard
        first, last = annotation.find('.'), annotation.rfind('.')
        if (first != 1 or last != len(annotation) - 2 or last - first < 2
                or '.' in annotation[first + 1:last]):
            raise EnzymeError('Malformed annotation: {}'.format(annotation))
        num_cleaved = 0
        peptide = aa_set.get_peptide(annotation[first + 1:last])
        if self.is_cleaved(peptide):
            num_cleaved += 1
        if self.is_n_term:
            neighbor = aa_set.get_amino_acid(annotation[-1])
        else:
            neighbor = aa_set.get_amino_acid(annotation[0])
        if neighbor is None or self.is_cleavable(neighbor):
            num_cleaved += 1
        return num_cleaved

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return 'Enzyme({!r}, {!r}, {})'.format(self._name, self._residues, self._terminus.name)


# name, residues, terminus, peptide efficiency, neighboring residue efficiency
builtin_enzymes = (
    ('Tryp', 'KR', Terminus.C_TERMINUS, 0.99999, 0.99999),
    ('CHYMOTRYPSIN', 'FYWL', Terminus.C_TERMINUS, 0.0, 0.0),
    ('LysC', 'K', Terminus.C_TERMINUS, 0.999, 0.999),
    ('LysN', 'K', Terminus.N_TERMINUS, 0.89, 0.79),
    ('GluC', 'E', Terminus.C_TERMINUS, 0.0, 0.0),
    ('ArgC', 'R', Terminus.C_TERMINUS, 0.0, 0.0),
    ('AspN', 'D', Terminus.N_TERMINUS, 0.0, 0.0),
)

aliases = {'Trypsin': 'Tryp', 'Chymotrypsin': 'CHYMOTRYPSIN'}

_registry = {}


def register(name, enzyme):
    if not isinstance(enzyme, Enzyme):
        raise EnzymeError('Not an enzyme: {!r}'.format(enzyme))
    if name in _registry:
        logging.debug('Replacing enzyme %s.', name)
    _registry[name] = enzyme


def get_enzyme_by_name(name):
    return _registry.get(name)


def registered_enzymes():
    return MappingProxyType(_registry)


def init_registry():
    for name, residues, terminus, peptide_eff, neighbor_eff in builtin_enzymes:
        register(name, Enzyme(name, residues, terminus, peptide_eff, neighbor_eff))
    for alias, name in aliases.items():
        register(alias, _registry[name])


init_registry()

TRYPSIN = _registry['Tryp']
CHYMOTRYPSIN = _registry['CHYMOTRYPSIN']
LYSC = _registry['LysC']
LYSN = _registry['LysN']
GLUC = _registry['GluC']
ARGC = _registry['ArgC']
ASPN = _registry['AspN']
