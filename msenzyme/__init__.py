from .enzyme import (Enzyme, EnzymeError, Terminus, register, get_enzyme_by_name,
                     registered_enzymes, TRYPSIN, CHYMOTRYPSIN, LYSC, LYSN, GLUC, ARGC, ASPN)
from .aminoacids import AminoAcid, AminoAcidSet, Peptide
from .rules import CleavageRule
