### this module handles pitch classes (notes in no particular octave, as ints where C is 0)
### and the choice of note names to spell them with, with or without a key to go by.

from .parsing import (note_positions, note_split, natural_note_names, natural_positions,
                      sharp_note_names, flat_note_names, offset_names, parse_key_mode, is_minor_mode)
from .util import log
from .config import def_scales
from . import _settings

# keyboard positions of the black keys, which have no natural name:
black_keys = (1, 3, 6, 8, 10)

def is_black(pc):
    return (pc % 12) in black_keys

def pitch_class(midi):
    """maps a MIDI note number (or any integer pitch) to its pitch class in 0-11"""
    return int(midi) % 12

def cast_pitch_class(value):
    """accepts an int (any octave, e.g. a MIDI number) or a note name string
    like 'C#' or 'E♭', and returns the corresponding pitch class as an int"""
    if isinstance(value, bool):
        raise TypeError(f'Expected an int or note name for pitch class, but got: {value!r}')
    if isinstance(value, int):
        return value % 12
    if hasattr(value, '__index__'):
        # numpy integer types:
        return int(value) % 12
    if isinstance(value, str):
        name = value.strip()
        if len(name) > 0:
            name = name[0].upper() + name[1:]
        if name not in note_positions:
            raise ValueError(f'Not a valid note name: {value!r}')
        return note_positions[name]
    raise TypeError(f'Expected an int or note name for pitch class, but got: {type(value).__name__}')

def preferred_name(pc, prefer_sharps=_settings.DEFAULT_SHARPS):
    """the single canonical name of a pitch class under a sharp/flat preference"""
    names = sharp_note_names if prefer_sharps else flat_note_names
    return names[pc % 12]

def root_names(pc, prefer_sharps=_settings.DEFAULT_SHARPS):
    """every canonical root name of a pitch class: both the sharp and the flat
    name for a black key (preferred spelling first), or just the letter for a white key"""
    pc = pc % 12
    if not is_black(pc):
        return [sharp_note_names[pc]]
    names = [sharp_note_names[pc], flat_note_names[pc]]
    return names if prefer_sharps else names[::-1]

def pitch_class_names(pc):
    """readable name of a pitch class, e.g. 'C# / Db' for 1 and 'D' for 2"""
    return ' / '.join(root_names(pc, prefer_sharps=True))

def ascii_name(name):
    """rewrites a note name with canonical ascii accidentals: 'B♭' -> 'Bb', 'F𝄪' -> 'Fx'"""
    letter, offset = note_split(name)
    return letter + offset_names[offset]


#### key signatures

def relative_major(key_name, key_mode):
    """the major key whose signature a key uses, or None for a key name not in the tables"""
    key_name = ascii_name(key_name)
    if is_minor_mode(key_mode):
        return def_scales.minor_relative_majors.get(key_name, None)
    if key_name in def_scales.major_signature_counts:
        return key_name
    return None

def key_accidental_map(key_name=None, key_mode=None):
    """returns a dict mapping each natural letter to the accidental offset
    (+1 sharp, -1 flat, 0 natural) that the key's signature gives it.
    minor keys read the signature of their relative major.
    with no key, or one not found in the signature tables, every letter is natural."""
    acc_map = {letter: 0 for letter in natural_note_names}
    if key_name is None:
        return acc_map
    mode = parse_key_mode(key_mode) if key_mode is not None else 'maj'
    try:
        major = relative_major(key_name, mode)
    except ValueError:
        major = None
    if major is None:
        log.warn(f'No key signature known for key {key_name} {key_mode}, assuming no accidentals')
        return acc_map

    count = def_scales.major_signature_counts[major]
    if count > 0:
        for letter in def_scales.sharp_order[:count]:
            acc_map[letter] = 1
    elif count < 0:
        for letter in def_scales.flat_order[:-count]:
            acc_map[letter] = -1
    return acc_map

def spell_pitch_class(pc, key_name=None, key_mode=None):
    """chooses the spelling of a pitch class that best fits a key's signature.
    every letter within a double accidental of the pitch is considered, and scored
    by how far its accidental strays from the key signature's (weighted most),
    then by the size of the accidental, then by whether it has one at all.
    the lowest score wins. with no key, C major is assumed."""
    pc = pc % 12
    if key_name is None:
        key_name, key_mode = 'C', 'maj'
    acc_map = key_accidental_map(key_name, key_mode if key_mode is not None else 'maj')

    best_name, best_score = None, None
    for letter in natural_note_names:
        for offset in range(-2, 3):
            if (natural_positions[letter] + offset) % 12 != pc:
                continue
            score = (abs(offset - acc_map[letter]) * 100
                     + abs(offset) * 10
                     + (1 if offset != 0 else 0))
            if best_score is None or score < best_score:
                best_name, best_score = letter + offset_names[offset], score
    return best_name
