### keys, key signatures and scale-degree data used for key-aware ranking and spelling.
### scale degrees are given throughout as semitone distances above the tonic (0-11).

### key signatures: number of sharps (positive) or flats (negative) for each major key
major_signature_counts = {
  'C': 0, 'G': 1, 'D': 2, 'A': 3, 'E': 4, 'B': 5, 'F#': 6, 'C#': 7,
  'F': -1, 'Bb': -2, 'Eb': -3, 'Ab': -4, 'Db': -5, 'Gb': -6, 'Cb': -7,
  }

# minor keys share the signature of their relative major:
minor_relative_majors = {
  'A': 'C', 'E': 'G', 'B': 'D', 'F#': 'A', 'C#': 'E', 'G#': 'B', 'D#': 'F#', 'A#': 'C#',
  'D': 'F', 'G': 'Bb', 'C': 'Eb', 'F': 'Ab', 'Bb': 'Db', 'Eb': 'Gb', 'Ab': 'Cb',
  }

# the order in which sharps and flats are added to a key signature:
sharp_order = ['F', 'C', 'G', 'D', 'A', 'E', 'B']
flat_order = ['B', 'E', 'A', 'D', 'G', 'C', 'F']

# keys whose signatures use sharps or flats; C major and A minor are neutral:
sharp_major_keys = {'G', 'D', 'A', 'E', 'B', 'F#', 'C#'}
flat_major_keys = {'F', 'Bb', 'Eb', 'Ab', 'Db', 'Gb', 'Cb'}
sharp_minor_keys = {'E', 'B', 'F#', 'C#', 'G#', 'D#', 'A#'}
flat_minor_keys = {'D', 'G', 'C', 'F', 'Bb', 'Eb', 'Ab'}


### root spellings of the black keys in each key.
### these follow the key signature where it has an opinion, and otherwise the
### spelling most often met in that key (e.g. F# rather than Gb as the raised 4th of C).
black_key_spellings_major = {
  'C':  {1: 'Db', 3: 'Eb', 6: 'F#', 8: 'Ab', 10: 'Bb'},
  'Db': {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'D':  {1: 'C#', 3: 'Eb', 6: 'F#', 8: 'G#', 10: 'Bb'},
  'Eb': {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'E':  {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'F':  {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'F#': {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'G':  {1: 'C#', 3: 'Eb', 6: 'F#', 8: 'Ab', 10: 'Bb'},
  'Ab': {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'A':  {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'Bb'},
  'Bb': {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'B':  {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  }

black_key_spellings_minor = {
  'A':  {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'Bb'},
  'Bb': {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'B':  {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'C':  {1: 'Db', 3: 'Eb', 6: 'F#', 8: 'Ab', 10: 'Bb'},
  'C#': {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'D':  {1: 'C#', 3: 'Eb', 6: 'F#', 8: 'G#', 10: 'Bb'},
  'D#': {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'Eb': {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'E':  {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'F':  {1: 'Db', 3: 'Eb', 6: 'Gb', 8: 'Ab', 10: 'Bb'},
  'F#': {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  'G':  {1: 'C#', 3: 'Eb', 6: 'F#', 8: 'Ab', 10: 'Bb'},
  'G#': {1: 'C#', 3: 'D#', 6: 'F#', 8: 'G#', 10: 'A#'},
  }


### scale degrees of each key mode:
mode_degrees = {
  'maj':     {0, 2, 4, 5, 7, 9, 11},
  'min_nat': {0, 2, 3, 5, 7, 8, 10},
  'min_har': {0, 2, 3, 5, 7, 8, 11},
  'min_mel': {0, 2, 3, 5, 7, 9, 11},
  }

### chord qualities that count as diatonic on each scale degree.
### quality tags are those produced by qualities.quality_tag
mode_allowed_qualities = {
  'maj':     {0: ['maj', 'maj7'], 2: ['min'], 4: ['min'], 5: ['maj', 'maj7'],
              7: ['maj', 'dom7'], 9: ['min'], 11: ['dim', 'halfDim']},
  'min_nat': {0: ['min'], 2: ['dim', 'halfDim'], 3: ['maj', 'maj7'], 5: ['min'],
              7: ['min', 'dom7'], 8: ['maj', 'maj7'], 10: ['maj']},
  'min_har': {0: ['min'], 2: ['dim', 'halfDim'], 3: ['maj', 'maj7'], 5: ['min'],
              7: ['dom7', 'maj'], 8: ['maj', 'maj7'], 11: ['dim', 'halfDim']},
  'min_mel': {0: ['min'], 2: ['min'], 3: ['maj', 'maj7'], 5: ['maj', 'maj7'],
              7: ['dom7', 'maj'], 9: ['maj', 'maj7'], 11: ['dim', 'halfDim']},
  }

### key-aware ranking bonuses:
key_weights = {
  'diatonic':         6,  # chord root lies on a degree of the scale
  'quality_match':    4,  # chord quality is allowed on that degree
  'dominant_major':   3,  # V7 in a major key
  'dominant_minor':   2,  # V7 in a minor key
  }

### bonus by the harmonic function of the chord root's degree,
### split by the chord's major/minor/diminished side:
degree_priority = {
  0:  {'major': 9, 'minor': 9},   # tonic
  7:  {'major': 8, 'minor': 8},   # dominant
  5:  {'major': 7, 'minor': 7},   # subdominant
  2:  {'major': 6, 'minor': 6},   # supertonic
  4:  {'major': 5, 'minor': 5},   # mediant
  9:  {'major': 4, 'minor': 4},   # submediant
  11: {'major': 3, 'minor': 2, 'dim': 2},  # leading tone
  }


### diatonic triads of major and minor keys, for display of a key's chords:
diatonic_major_triads = [
  # roman,  degree, quality
  ('I',     0,  'maj'),
  ('ii',    2,  'min'),
  ('iii',   4,  'min'),
  ('IV',    5,  'maj'),
  ('V',     7,  'maj'),
  ('vi',    9,  'min'),
  ('vii°',  11, 'dim'),
  ]

diatonic_minor_triads = [
  ('i',     0,  'min'),
  ('ii°',   2,  'dim'),
  ('III',   3,  'maj'),
  ('iv',    5,  'min'),
  ('v',     7,  'min'),
  ('VI',    8,  'maj'),
  ('VII',   10, 'maj'),
  ]

# roman numeral stems for each chromatic degree above the tonic:
degree_numerals = {
  0: 'I', 1: 'bII', 2: 'II', 3: 'bIII', 4: 'III', 5: 'IV',
  6: '#IV', 7: 'V', 8: 'bVI', 9: 'VI', 10: 'bVII', 11: 'VII',
  }
