from pyteomics import parser
from pyteomics.auxiliary import PyteomicsError
from collections import namedtuple

# IUPAC codes found in protein databases besides the 20 standard residues
extended_amino_acids = ['B', 'J', 'O', 'U', 'X', 'Z']


class AminoAcid(namedtuple('AminoAcid', ('label', 'residue'))):
    """A residue as it appears in a peptide: its modX label and the
    unmodified one-letter code."""
    __slots__ = ()

    @property
    def is_modified(self):
        return self.label != self.residue


class Peptide(tuple):
    """Ordered sequence of :py:class:`AminoAcid`."""
    __slots__ = ()

    @property
    def sequence(self):
        return ''.join(aa.label for aa in self)

    def __repr__(self):
        return 'Peptide(%r)' % self.sequence


class AminoAcidSet:
    """Alphabet used to resolve flanking residues and parse peptide strings.

    Parameters
    ----------
    modifications : iterable of str, optional
        modX labels (e.g. ``'oxM'``) allowed in addition to the unmodified
        residues.
    amino_acids : iterable of str, optional
        One-letter residue codes. Defaults to the standard residues of
        :py:mod:`pyteomics.parser` plus the extended IUPAC codes.
    """

    def __init__(self, modifications=(), amino_acids=None):
        if amino_acids is None:
            amino_acids = parser.std_amino_acids + extended_amino_acids
        self.amino_acids = {}
        for residue in amino_acids:
            self.amino_acids[residue] = AminoAcid(residue, residue)
        for label in modifications:
            if not parser.is_modX(label) or len(label) < 2 or label[-1] not in self.amino_acids:
                raise PyteomicsError('Invalid modification label: {}'.format(label))
            self.amino_acids[label] = AminoAcid(label, label[-1])
        self.labels = list(self.amino_acids) + [parser.std_nterm, parser.std_cterm]

    def get_amino_acid(self, label):
        return self.amino_acids.get(label)

    def get_peptide(self, sequence):
        labels = parser.parse(sequence, labels=self.labels)
        return Peptide(self.amino_acids[label] for label in labels)

    def __contains__(self, label):
        return label in self.amino_acids


standard = AminoAcidSet()
