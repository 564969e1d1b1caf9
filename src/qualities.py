# structural classification of chord patterns: perceptual families and key-quality tags
from .util import log
from .config.def_chords import family_weights

#### chord families:

# each rule is a predicate over a ChordPattern's structure. the rules are tried in
# this order and the first one that holds names the pattern's family.

def _special(p):
    # suspended, augmented, diminished and flat-five chords with no extensions of their own:
    if p.is_tension or p.is_parenthetical:
        return False
    if p.suspended:
        return True
    if p.fifth == 6:
        return True
    return p.third == 4 and p.fifth == 8

def _minor_aug5(p):
    return p.third == 3 and p.fifth == 8

def _sixth(p):
    return p.has_sixth and p.seventh is None

def _dom7(p):
    return p.seventh == 10 and not p.is_tension

def _maj7(p):
    return p.seventh == 11 and not p.is_tension

def _add9(p):
    # named by its spelling: a (9) in parentheses is a Nineth like m(9)
    return p.head.startswith('add9')

def _nineth(p):
    return p.is_tension or p.is_parenthetical

def _minor(p):
    return p.third == 3

FAMILY_RULES = (
    ('SpecialLast', _special),
    ('MinorAug5',   _minor_aug5),
    ('Sixth',       _sixth),
    ('Dom7',        _dom7),
    ('Maj7Only',    _maj7),
    ('Add9',        _add9),
    ('Nineth',      _nineth),
    ('Minor',       _minor),
    ('Major',       lambda p: True),
    )

def family_of(pattern, rules=FAMILY_RULES):
    """returns the name of the first family whose rule the pattern satisfies"""
    for family, rule in rules:
        if rule(pattern):
            return family
    return 'Major'

def family_weight(family):
    """returns the score weight of a chord family, or 0 for an unknown one"""
    if family not in family_weights:
        log(f'No weight defined for chord family: {family}')
    return family_weights.get(family, 0)


#### qualities as seen by a key:

def quality_tag(pattern):
    """the coarse chord quality that the key-aware ranking checks against each
    scale degree's allowed qualities: one of 'halfDim', 'dim', 'maj7', 'dom7', 'min', 'maj'"""
    if pattern.third == 3 and pattern.fifth == 6:
        if pattern.seventh == 10:
            return 'halfDim'
        return 'dim'
    if pattern.third == 4 and pattern.seventh == 11:
        return 'maj7'
    if pattern.third == 4 and pattern.seventh == 10:
        return 'dom7'
    if pattern.third == 3:
        return 'min'
    return 'maj'

def degree_side(pattern, degree):
    """which column of the degree-priority table a chord reads from:
    'dim', 'minor' or 'major'. suspended chords have no third to go by,
    so take the major side on the tonic, subdominant and dominant and the minor side elsewhere."""
    if pattern.third == 3 and pattern.fifth == 6:
        return 'dim'
    if pattern.third == 3:
        return 'minor'
    if pattern.suspended:
        return 'major' if degree in (0, 5, 7) else 'minor'
    return 'major'
