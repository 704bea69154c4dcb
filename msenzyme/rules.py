from pyteomics import parser
import logging

from .enzyme import Enzyme, EnzymeError, Terminus


class CleavageRule:
    """X!Tandem cleavage site rule, e.g. ``[RK]|{P}`` for trypsin.

    The part before ``|`` describes the residue before the cleaved bond,
    the part after it the residue after the bond. ``[..]`` lists residues
    that are cut, ``{..}`` residues that prevent cleavage, and ``X`` is any
    standard residue.
    """

    def __init__(self, cleavage_rule):
        self.cleavage_rule = cleavage_rule.strip()
        self.cut = None
        self.no_cut = None
        self.sense = None
        self.get_info()

    def get_info(self):
        rule = self.cleavage_rule.replace('X', ''.join(parser.std_amino_acids))
        try:
            c_term_rule, n_term_rule = rule.split('|')
        except ValueError:
            raise EnzymeError('Invalid cleavage rule: {}'.format(self.cleavage_rule))
        self.sense = self.get_sense(c_term_rule, n_term_rule)
        if self.sense == 'C':
            self.cut, self.no_cut = self.get_cut(c_term_rule, n_term_rule)
        else:
            self.cut, self.no_cut = self.get_cut(n_term_rule, c_term_rule)
        if not self.cut:
            raise EnzymeError('No cleavable residues in rule: {}'.format(self.cleavage_rule))

    @staticmethod
    def get_sense(c_term_rule, n_term_rule):
        # the cleaving residues sit opposite an exclusion, else on the shorter side
        if '{' in c_term_rule or '{' in n_term_rule:
            return 'N' if '{' in c_term_rule else 'C'
        return 'C' if len(c_term_rule) <= len(n_term_rule) else 'N'

    @staticmethod
    def get_cut(cut, no_cut):
        aminoacids = set(parser.std_amino_acids)
        cut = ''.join(sorted(aminoacids & set(cut)))
        if '{' in no_cut:
            no_cut = ''.join(sorted(aminoacids & set(no_cut)))
        else:
            no_cut = ''.join(sorted(aminoacids - set(no_cut)))
        return cut, no_cut

    def to_enzyme(self, name=None):
        if self.no_cut:
            logging.debug('Rule %s: residues %s blocking cleavage are not used.',
                          self.cleavage_rule, self.no_cut)
        return Enzyme(name or self.cleavage_rule, self.cut, Terminus(self.sense))

    def __repr__(self):
        return 'CleavageRule({!r})'.format(self.cleavage_rule)
