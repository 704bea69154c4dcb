from pyteomics.auxiliary import PyteomicsError
from lxml import etree
import jinja2
import argparse
import logging
import os
import sys

from . import config
from .aminoacids import AminoAcidSet
from .enzyme import get_enzyme_by_name, registered_enzymes


def render(**template_vars):
    templateloader = jinja2.FileSystemLoader(os.path.join(os.path.dirname(__file__), 'templates'))
    templateenv = jinja2.Environment(loader=templateloader)
    template = templateenv.get_template('report.jinja')
    return template.render(template_vars)


def write(path_to_output=None, **template_vars):
    report = render(**template_vars)
    if path_to_output:
        logging.info('Writing report to %s.', path_to_output)
        with open(path_to_output, 'w') as output:
            output.write(report)
    else:
        sys.stdout.write(report)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Count enzymatically cleaved termini of annotated peptides.',
        epilog='''

    Example usage
    -------------

    * Count cleaved termini for trypsin:

      $ msenzyme K.DLFGEK.I R.AAAAA.-

    * Use another registered enzyme, allow oxidized methionine:

      $ msenzyme -e LysN -m oxM K.KPEoxMD.A

    * Use the cleavage rules of an X!Tandem parameter file:

      $ msenzyme --params input.xml K.DLFGEK.I

    * List the registered enzymes:

      $ msenzyme --list

    ''',
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('annotations', nargs='*', metavar='ANNOTATION',
            help='peptides with flanking residues, e.g. K.DLFGEK.I')
    parser.add_argument('-e', '--enzyme', help='enzyme name (default: Tryp, or the first rule from --params)')
    parser.add_argument('-p', '--params', default=config._params, metavar='FILE',
            help='X!Tandem parameter file with "protein, cleavage site" rules')
    parser.add_argument('-m', '--modification', action='append', default=[], metavar='LABEL',
            help='modX label allowed in peptides, e.g. oxM')
    parser.add_argument('-l', '--list', action='store_true', help='list registered enzymes')
    parser.add_argument('-o', '--out', help='path to output file')
    parser.add_argument('-v', '--verbosity', action='count', default=0, help='Increase output verbosity')
    args = parser.parse_args(argv)
    levels = [logging.ERROR, logging.INFO, logging.DEBUG]
    level = 2 if args.verbosity > 2 else args.verbosity
    logging.basicConfig(format='%(levelname)5s: %(asctime)s %(message)s',
            datefmt='[%H:%M:%S]', level=levels[level])

    enzyme_name = args.enzyme or 'Tryp'
    if args.params:
        if not os.path.exists(args.params):
            logging.error('Could not find the parameter file: %s', args.params)
            sys.exit(1)
        try:
            loaded = config.load_enzymes(args.params)
        except etree.XMLSyntaxError as e:
            logging.error('Could not parse the parameter file %s: %s', args.params, e)
            sys.exit(1)
        except PyteomicsError as e:
            logging.error('Invalid cleavage rule in %s: %s', args.params, e.message)
            sys.exit(1)
        if loaded and not args.enzyme:
            enzyme_name = loaded[0].name

    enzyme = get_enzyme_by_name(enzyme_name)
    if enzyme is None:
        logging.error('Unknown enzyme: %s', enzyme_name)
        sys.exit(1)
    logging.debug('Using enzyme %r.', enzyme)

    try:
        aa_set = AminoAcidSet(args.modification)
        termini = [(annotation, enzyme.get_num_cleaved_termini(annotation, aa_set))
                   for annotation in args.annotations]
    except PyteomicsError as e:
        logging.error(e.message)
        sys.exit(1)

    if not termini and not args.list:
        logging.info('Nothing to do.')
        return
    write(args.out,
          enzymes=sorted(registered_enzymes().items()) if args.list else [],
          termini=termini,
          enzyme=enzyme)
    logging.info('Done.')
