#### string parsing functions
from .util import unpack_and_reverse_dict, log

################### accidentals

# map semitone offset values to accidental character aliases.
# the last alias in each list is the canonical ascii form used in output:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['♮', ''],
                 1: ['♯', '#'],
                 2: ['𝄪', '##', '♯♯', 'x']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

# canonical ascii accidental for each offset:
offset_names = {offset: chars[-1] for offset, chars in offset_accidentals.items()}


################### note names

natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

sharp_note_names = ['C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B']
flat_note_names =  ['C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab', 'A', 'Bb', 'B']

# map every spelling of every note to its keyboard position (where C is 0),
# e.g. 'C#', 'D♭', 'E#', 'Fb', 'Cx', 'B𝄫':
note_positions = {}
for letter in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            note_positions[f'{letter}{acc}'] = (natural_positions[letter] + offset) % 12

def note_split(name):
    """splits a spelled note name into its natural letter
    and its integer accidental offset, e.g. 'Eb' -> ('E', -1)"""
    letter, acc = name[0], name[1:]
    if letter not in natural_positions or acc not in accidental_offsets:
        raise ValueError(f'not a valid note name: {name}')
    return letter, accidental_offsets[acc]

def parse_root_text(text):
    """accepts a typed root note name, like 'C#' or ' e♭ ',
    and returns its pitch class as an int, or None if it cannot be parsed.
    (this is the lenient parser used at input boundaries, so it never raises)"""
    if not isinstance(text, str):
        return None
    text = text.strip()
    if len(text) == 0:
        return None
    # letters are accepted in either case, accidentals as written:
    text = text[0].upper() + text[1:]
    if text in note_positions:
        return note_positions[text]
    log(f'Could not parse root text: {text}')
    return None


################### key modes

# canonical mode names are those used by KeyState.mode:
mode_aliases = {'maj':     ['major', 'M', 'ionian', 'natural major'],
                'min_nat': ['min', 'minor', 'm', 'aeolian', 'natural minor', 'minorNatural'],
                'min_har': ['harmonic minor', 'minorHarmonic'],
                'min_mel': ['melodic minor', 'jazz minor', 'minorMelodic'],
                }
alias_modes = unpack_and_reverse_dict(mode_aliases, include_keys=True)

def parse_key_mode(mode):
    """returns the canonical name of a key mode alias ('maj', 'min_nat', 'min_har'
    or 'min_mel'), or None if mode is None or not a recognised alias"""
    if mode is None:
        return None
    if not isinstance(mode, str):
        return None
    if mode in alias_modes:
        return alias_modes[mode]
    # case-insensitive except for the crucial distinction between m and M:
    lowered = mode.strip().lower()
    return alias_modes.get(lowered, None)

def is_minor_mode(mode):
    return mode is not None and mode.startswith('min')
