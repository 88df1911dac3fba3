import logging

from .errors import InvalidQuantifierPosition
from .syntax import *

logger = logging.getLogger(__name__)

def parse(regex: str) -> list[Construction]:
    '''
    Parse a regex into a flat list of constructions, one per atom. A quantifier wraps the atom
    right before it.
    '''
    constructions: list[Construction] = []
    # Whether the last construction is a bare atom that a quantifier may still apply to.
    quantifiable = False

    for index, c in enumerate(regex):
        match c:
            case '?' | '*' | '+':
                if not quantifiable:
                    raise InvalidQuantifierPosition(c, index)
                last = constructions.pop()
                constructions.append(quantifiers[c](last))
                quantifiable = False
            case '.':
                constructions.append(WildCard())
                quantifiable = True
            case _:
                constructions.append(Literal(c))
                quantifiable = True

    logger.debug("Parsed %r into %d constructions", regex, len(constructions))
    return constructions
