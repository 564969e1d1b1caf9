### this module holds the key that chord detection is biased towards, as an immutable KeyState,
### and everything that depends on it: key-aware ranking bonuses, root spelling by key,
### and the diatonic chords and roman numerals of a key.

from .parsing import parse_root_text, parse_key_mode, is_minor_mode, sharp_note_names
from .notes import is_black, ascii_name, preferred_name, spell_pitch_class
from .qualities import quality_tag, degree_side
from .chords import catalog_by_name
from .util import log
from .config import def_scales

from dataclasses import dataclass


signature_preferences = (None, 'sharp', 'flat')
neutral_bases = (None, 'C', 'A')
selection_modes = ('manual', 'auto')


@dataclass(frozen=True)
class KeyState:
    """a snapshot of the key used to bias chord ranking and choose root spellings.
    all fields are optional; the default KeyState means 'no key'.
        signature_preference: 'sharp', 'flat' or None (neutral) - which black-key
            root names are kept in the output
        neutral_base: 'C' or 'A' when the key has no signature (C major / A minor)
        tonic: pitch class of the key's tonic
        mode: one of 'maj', 'min_nat', 'min_har', 'min_mel'
        selection_mode: 'manual' or 'auto' (how the key was chosen, for the caller's benefit)
        current_key_name, current_key_mode: the key as named, used for root spelling.
    invalid field values are replaced by None (or 'manual') with a warning, rather than raising."""
    signature_preference: str = None
    neutral_base: str = None
    tonic: int = None
    mode: str = None
    selection_mode: str = 'manual'
    current_key_name: str = None
    current_key_mode: str = None

    def __post_init__(self):
        # frozen, so normalise through object.__setattr__:
        if self.signature_preference not in signature_preferences:
            log.warn(f'Invalid key signature preference {self.signature_preference!r}, treating as neutral')
            object.__setattr__(self, 'signature_preference', None)
        if self.neutral_base not in neutral_bases:
            log.warn(f'Invalid neutral key base {self.neutral_base!r}, ignoring')
            object.__setattr__(self, 'neutral_base', None)
        if self.tonic is not None:
            if isinstance(self.tonic, bool) or not isinstance(self.tonic, int) or not (0 <= self.tonic < 12):
                log.warn(f'Invalid key tonic {self.tonic!r}, treating as no key')
                object.__setattr__(self, 'tonic', None)
        for field_name in ('mode', 'current_key_mode'):
            value = getattr(self, field_name)
            if value is not None:
                parsed = parse_key_mode(value)
                if parsed is None:
                    log.warn(f'Invalid key mode {value!r}, treating as no key')
                object.__setattr__(self, field_name, parsed)
        if self.current_key_name is not None:
            if parse_root_text(self.current_key_name) is None:
                log.warn(f'Invalid key name {self.current_key_name!r}, ignoring')
                object.__setattr__(self, 'current_key_name', None)
        if self.selection_mode not in selection_modes:
            log.warn(f'Invalid key selection mode {self.selection_mode!r}, using manual')
            object.__setattr__(self, 'selection_mode', 'manual')

    @property
    def active(self):
        """True if this state has both a tonic and a mode to bias ranking by"""
        return self.tonic is not None and self.mode is not None

    @property
    def minor(self):
        return is_minor_mode(self.mode)

    @classmethod
    def from_key(cls, key_name, key_mode='maj', selection_mode='manual'):
        """builds the full KeyState for a named key, like ('Eb', 'maj') or ('F#', 'min_har').
        a key name or mode that cannot be parsed gives the empty (no key) state."""
        mode = parse_key_mode(key_mode)
        tonic = parse_root_text(key_name)
        if tonic is None or mode is None:
            log.warn(f'Could not parse key {key_name!r} {key_mode!r}, treating as no key')
            return cls(selection_mode=selection_mode)
        name = ascii_name(key_name.strip()[0].upper() + key_name.strip()[1:])
        preference, neutral = key_signature_preference(name, mode)
        return cls(signature_preference=preference, neutral_base=neutral,
                   tonic=tonic, mode=mode, selection_mode=selection_mode,
                   current_key_name=name, current_key_mode=mode)

    def __str__(self):
        if not self.active:
            return 'KeyState:(no key)'
        name = self.current_key_name or sharp_note_names[self.tonic]
        return f'KeyState:{name} {self.mode}'

    def __repr__(self):
        return str(self)


def key_signature_preference(key_name, mode):
    """returns a tuple of (signature_preference, neutral_base) for a named key:
    'sharp' or 'flat' for keys whose signature uses them, otherwise None,
    with neutral_base 'C' for C major or 'A' for A minor"""
    if is_minor_mode(parse_key_mode(mode)):
        sharp_keys, flat_keys, neutral = def_scales.sharp_minor_keys, def_scales.flat_minor_keys, 'A'
    else:
        sharp_keys, flat_keys, neutral = def_scales.sharp_major_keys, def_scales.flat_major_keys, 'C'
    if key_name in sharp_keys:
        return 'sharp', None
    elif key_name in flat_keys:
        return 'flat', None
    elif key_name == neutral:
        return None, neutral
    else:
        # keys like G# major have no signature in the tables, and no preference:
        return None, None


#### process-wide key state:
# replaced wholesale by the setters below, never mutated, so that a detection call
# that reads it once works from a consistent snapshot.

_key_state = KeyState()

def get_key_state():
    return _key_state

def set_key_state(**fields):
    """replaces the process-wide key state. fields not given take their
    defaults, so this is a full replacement and not an update"""
    global _key_state
    _key_state = KeyState(**fields)
    log(f'Key state set to {_key_state}')
    return _key_state

def set_key(key_name, key_mode='maj', selection_mode='manual'):
    global _key_state
    _key_state = KeyState.from_key(key_name, key_mode, selection_mode)
    log(f'Key state set to {_key_state}')
    return _key_state

def clear_key():
    return set_key_state()


#### root spelling:

def select_root_name(pc, key_name=None, key_mode=None):
    """the one root name to show for a pitch class in a key.
    white keys always take their natural letter. black keys take the key's entry in the
    spelling tables, or where the key has none, the spelling that best fits its signature.
    with no key, C major is assumed. an unrecognised key name falls back to the sharp name."""
    pc = pc % 12
    if not is_black(pc):
        return sharp_note_names[pc]
    if key_name is None:
        key_name, key_mode = 'C', 'maj'
    if parse_root_text(key_name) is None:
        log.warn(f'Unknown key name {key_name!r} for spelling, using sharp name')
        return preferred_name(pc, prefer_sharps=True)
    key_name = key_name.strip()
    key_name = ascii_name(key_name[0].upper() + key_name[1:])
    mode = parse_key_mode(key_mode)
    if is_minor_mode(mode):
        table = def_scales.black_key_spellings_minor.get(key_name)
    else:
        table = def_scales.black_key_spellings_major.get(key_name)
    if table is not None:
        return table[pc]
    log(f'No spelling table for key {key_name} {mode}, spelling by key signature')
    return spell_pitch_class(pc, key_name, mode if mode is not None else 'maj')


#### key-aware ranking:

def degree_priority_bonus(degree, pattern):
    """bonus for the harmonic function of a root's scale degree, read from the
    column for the chord's quality, falling back between dim and minor, then to major"""
    table = def_scales.degree_priority.get(degree)
    if table is None:
        return 0
    side = degree_side(pattern, degree)
    if side in table:
        return table[side]
    if side == 'dim' and 'minor' in table:
        return table['minor']
    if side == 'minor' and 'dim' in table:
        return table['dim']
    return table.get('major', 0)

def key_boost(root, pattern, key_state=None):
    """additional score for a chord built on 'root' from 'pattern', given a key:
    for lying on a degree of the key's scale, for having a quality that
    belongs on that degree, for being the dominant seventh, and for the
    harmonic weight of the degree. zero if the key state has no key."""
    if key_state is None:
        key_state = get_key_state()
    if not key_state.active:
        return 0
    weights = def_scales.key_weights
    mode = key_state.mode
    degree = (root - key_state.tonic) % 12
    quality = quality_tag(pattern)

    boost = 0
    if degree in def_scales.mode_degrees[mode]:
        boost += weights['diatonic']
    if quality in def_scales.mode_allowed_qualities[mode].get(degree, []):
        boost += weights['quality_match']
    if degree == 7 and quality == 'dom7':
        boost += weights['dominant_minor'] if key_state.minor else weights['dominant_major']
    boost += degree_priority_bonus(degree, pattern)
    return boost


#### diatonic helpers:

def scale_pitch_classes(key_state=None):
    """the set of pitch classes in the key's scale, or None with no key"""
    if key_state is None:
        key_state = get_key_state()
    if not key_state.active:
        return None
    return {(key_state.tonic + d) % 12 for d in def_scales.mode_degrees[key_state.mode]}

def diatonic_pattern(key_state=None):
    """the (roman, degree, quality) triads of the key's mode: the major table
    for major keys, the natural minor table for every minor mode, or None with no key"""
    if key_state is None:
        key_state = get_key_state()
    if not key_state.active:
        return None
    if key_state.minor:
        return def_scales.diatonic_minor_triads
    return def_scales.diatonic_major_triads

# chord patterns of the triad qualities used by the diatonic tables:
triad_pattern_names = {'maj': '', 'min': 'm', 'dim': '°'}

def diatonic_chords(key_state=None, preset=None):
    """returns a list of (roman, root, name) tuples for the triads of a key,
    with roots spelled by the key signature, e.g. ('ii', 2, 'Dm') in C major.
    returns an empty list with no key."""
    if key_state is None:
        key_state = get_key_state()
    table = diatonic_pattern(key_state)
    if table is None:
        return []
    chords = []
    for roman, degree, quality in table:
        root = (key_state.tonic + degree) % 12
        root_name = spell_pitch_class(root, key_state.current_key_name, key_state.current_key_mode)
        pattern = catalog_by_name[triad_pattern_names[quality]]
        chords.append((roman, root, root_name + pattern.label(preset)))
    return chords

def roman_numeral(root, pattern, key_state=None):
    """the roman numeral of a chord's root degree in a key, cased by the chord's
    quality: 'V' or 'bVII' for major chords, 'ii' for minor, 'vii°' for diminished,
    'viiø' for half-diminished. None with no key."""
    if key_state is None:
        key_state = get_key_state()
    if not key_state.active:
        return None
    degree = (root - key_state.tonic) % 12
    numeral = def_scales.degree_numerals[degree]
    accidental = numeral.rstrip('IV')
    numeral = numeral[len(accidental):]
    quality = quality_tag(pattern)
    if quality == 'min':
        return accidental + numeral.lower()
    elif quality == 'dim':
        return accidental + numeral.lower() + '°'
    elif quality == 'halfDim':
        return accidental + numeral.lower() + 'ø'
    else:
        return accidental + numeral.upper()
