from lxml import etree
import logging
import os

from .enzyme import register
from .rules import CleavageRule

_params = os.environ.get('MSENZYME_PARAMS')

CLEAVAGE_SITE = 'protein, cleavage site'


def build_dict(xml):
    """Read an X!Tandem parameter file into a ``{label: value}`` dict."""
    params = {}
    tree = etree.parse(xml)
    for note in tree.iter():
        if "label" in note.attrib:
            if note.text is None:
                params[note.attrib["label"]] = ''
            else:
                params[note.attrib["label"]] = note.text.strip()
    params.pop("list path, default parameters", None)
    return params


def cleavage_rules(params):
    return [CleavageRule(rule) for rule in params.get(CLEAVAGE_SITE, '').split(',') if rule.strip()]


def load_enzymes(xml):
    """Register an enzyme for every cleavage rule in the parameter file.

    Enzymes are named after their rules. Returns the list of enzymes.
    """
    logging.info('Loading cleavage rules from %s.', xml)
    params = build_dict(xml)
    rules = cleavage_rules(params)
    if not rules:
        logging.warning('No "%s" parameter in %s.', CLEAVAGE_SITE, xml)
    enzymes = []
    for rule in rules:
        enzyme = rule.to_enzyme()
        register(enzyme.name, enzyme)
        logging.debug('Registered enzyme %s: %s-terminal, residues %s.',
                      enzyme.name, enzyme.terminus.value, enzyme.residues)
        enzymes.append(enzyme)
    return enzymes
