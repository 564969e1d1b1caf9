### chord patterns and their names - for example, 'm7' and 'sus4' and 'Δ9' are defined in this module.
### new chord patterns can be freely added by following the examples below.

### a pattern is defined by semitone intervals from its root, split into:
###   core:     tones that must all be held for the pattern to match
###   optional: tones that may be held or left out
### and a list of scale degrees, one for each interval of core+optional in the
### order given, counted from 0 (0 = root, 1 = 2nd/9th, 2 = 3rd, 3 = 4th/11th,
### 4 = 5th, 5 = 6th/13th, 6 = 7th). degrees decide how each tone is spelled,
### e.g. interval 3 on degree 2 is a minor third (Eb over C) while
### interval 3 on degree 1 would be a sharp ninth (D#).
### intervals above 11 name extensions: 13/14/15 are b9/9/#9, 17/18 are 11/#11, 20/21 are b13/13.

### note: any pattern whose core contains the perfect fifth (7) has that fifth
### relaxed during matching, so it never needs to be held. a fifth listed as
### optional is different: leaving it out counts as an optional miss.

# basic triads, sixths and sevenths:
base_patterns = [
  # name     core              optional  degrees              description
  ('',       [0, 4],           [7],      [0, 2, 4],           'major triad'),
  ('m',      [0, 3],           [7],      [0, 2, 4],           'minor triad'),
  ('+',      [0, 4, 8],        [],       [0, 2, 4],           'augmented triad'),
  ('°',      [0, 3, 6],        [],       [0, 2, 4],           'diminished triad'),
  ('sus2',   [0, 2, 7],        [],       [0, 1, 4],           'suspended 2nd'),
  ('sus4',   [0, 5, 7],        [],       [0, 3, 4],           'suspended 4th'),
  ('6',      [0, 4, 9],        [7],      [0, 2, 5, 4],        'major sixth'),
  ('m6',     [0, 3, 9],        [7],      [0, 2, 5, 4],        'minor sixth'),
  ('7',      [0, 4, 10],       [7],      [0, 2, 6, 4],        'dominant seventh'),
  ('-5',     [0, 4, 6],        [],       [0, 2, 4],           'major flat five'),
  ('7-5',    [0, 4, 6, 10],    [],       [0, 2, 4, 6],        'dominant seven flat five'),
  ('Δ7',     [0, 4, 11],       [7],      [0, 2, 6, 4],        'major seventh'),
  ('m7',     [0, 3, 10],       [7],      [0, 2, 6, 4],        'minor seventh'),
  ('ø7',     [0, 3, 6, 10],    [],       [0, 2, 4, 6],        'half-diminished seventh'),
  ('°7',     [0, 3, 6, 9],     [],       [0, 2, 4, 6],        'diminished seventh'),
  ('7+5',    [0, 4, 8, 10],    [],       [0, 2, 4, 6],        'dominant seven sharp five'),
  ('69',     [0, 4, 9, 14],    [7],      [0, 2, 5, 1, 4],     'six nine'),
  ('7sus2',  [0, 2, 7, 10],    [],       [0, 1, 4, 6],        'dominant seven suspended 2nd'),
  ('7sus4',  [0, 5, 7, 10],    [],       [0, 3, 4, 6],        'dominant seven suspended 4th'),
  ('mΔ7',    [0, 3, 11],       [7],      [0, 2, 6, 4],        'minor major seventh'),
  ]

# extended chords (9ths, 11ths, 13ths).
# a name like '9(b5)' marks an alteration written in parentheses; such patterns
# are treated as parenthetical during matching, just like the generated ones below.
tension_patterns = [
  # minor family:
  ('m9',     [0, 3, 10, 14],       [7],          [0, 2, 6, 1, 4],           'minor ninth'),
  ('m11',    [0, 3, 10, 14, 17],   [7],          [0, 2, 6, 1, 3, 4],        'minor eleventh'),
  ('m13',    [0, 3, 10, 21],       [7, 14, 17],  [0, 2, 6, 5, 4, 1, 3],     'minor thirteenth'),
  ('m6/9',   [0, 3, 9, 14],        [7],          [0, 2, 5, 1, 4],           'minor six nine'),

  # dominant family:
  ('9',      [0, 4, 10, 14],       [7],          [0, 2, 6, 1, 4],           'dominant ninth'),
  ('9(b5)',  [0, 4, 6, 10, 14],    [],           [0, 2, 4, 6, 1],           'dominant nine flat five'),
  ('9(#5)',  [0, 4, 8, 10, 14],    [],           [0, 2, 4, 6, 1],           'dominant nine sharp five'),
  ('9(#11)', [0, 4, 10, 14, 18],   [7],          [0, 2, 6, 1, 3, 4],        'dominant nine sharp eleven'),
  ('11',     [0, 4, 10, 17],       [7, 14],      [0, 2, 6, 3, 4, 1],        'dominant eleventh'),
  ('13',     [0, 4, 10, 21],       [7, 14, 17],  [0, 2, 6, 5, 4, 1, 3],     'dominant thirteenth'),
  ('13(b5)', [0, 4, 6, 10, 21],    [14, 17],     [0, 2, 4, 6, 5, 1, 3],     'dominant thirteen flat five'),
  ('13(#5)', [0, 4, 8, 10, 21],    [14, 17],     [0, 2, 4, 6, 5, 1, 3],     'dominant thirteen sharp five'),

  # major family:
  ('Δ9',     [0, 4, 11, 14],       [7],          [0, 2, 6, 1, 4],           'major ninth'),
  ('Δ11',    [0, 4, 11, 17],       [7, 14],      [0, 2, 6, 3, 4, 1],        'major eleventh'),
  ('Δ13',    [0, 4, 11, 21],       [7, 14, 17],  [0, 2, 6, 5, 4, 1, 3],     'major thirteenth'),

  # minor major family:
  ('mΔ9',    [0, 3, 11, 14],       [7],          [0, 2, 6, 1, 4],           'minor major ninth'),
  ('mΔ11',   [0, 3, 11, 14, 17],   [7],          [0, 2, 6, 1, 3, 4],        'minor major eleventh'),
  ('mΔ13',   [0, 3, 11, 21],       [7, 14, 17],  [0, 2, 6, 5, 4, 1, 3],     'minor major thirteenth'),
  ]

# tensions that can be combined inside parentheses, e.g. C7(b9,13).
# note that this dict order is non-arbitrary: it is the order in which
# tensions are listed inside the generated chord names.
tension_tags = {
  # label: (interval, degree, description)
  'b9':  (13, 1, 'flat ninth'),
  '9':   (14, 1, 'ninth'),
  '#9':  (15, 1, 'sharp ninth'),
  '11':  (17, 3, 'eleventh'),
  '#11': (18, 3, 'sharp eleventh'),
  'b13': (20, 5, 'flat thirteenth'),
  '13':  (21, 5, 'thirteenth'),
  }

# chords that accept parenthetical tensions, and which tensions each accepts.
# every combination of 1 to MAX_PAREN_TENSIONS (see _settings) allowed tensions
# becomes its own pattern in the catalog:
paren_bases = [
  # name   core             degrees          allowed tensions                              description
  ('',     [0, 4, 7],       [0, 2, 4],       ['b9', '9', '#9', '11', '#11', 'b13', '13'],  'major triad with parenthetical tensions'),
  ('7',    [0, 4, 7, 10],   [0, 2, 4, 6],    ['b9', '9', '#9', '#11', 'b13', '13'],        'dominant seventh with parenthetical tensions'),
  ('m',    [0, 3, 7],       [0, 2, 4],       ['b9', '9', '11', '13'],                      'minor triad with parenthetical tensions'),
  ('m6',   [0, 3, 7, 9],    [0, 2, 4, 5],    ['b9', '9', '11'],                            'minor sixth with parenthetical tensions'),
  ('m7',   [0, 3, 7, 10],   [0, 2, 4, 6],    ['b9', '9', '11', '13'],                      'minor seventh with parenthetical tensions'),
  ]


### scoring weights for matched chord patterns.
### (an optional miss scores one point MORE than an exact match; this is
### long-standing ranking behaviour and is kept as-is)
score_weights = {
  'exact':              10,  # all core and optional tones held, nothing else
  'optional_miss':      11,  # all core tones held, nothing else, but some optional tone missing
  'core_hit':            4,  # per held core tone
  'optional_hit':        2,  # per held optional tone (not counting a relaxed fifth)
  'core_miss':          -6,  # per missing core tone
  'optional_miss_tone': -2,  # per missing optional tone (not counting a relaxed fifth)
  'extra':              -4,  # per held tone that the pattern does not explain
  'forced_root':         2,  # candidate is built on the requested root
  'paren':              -6,  # parenthetical pattern
  'paren_missing_root': -8,  # parenthetical pattern whose root is not held
  'tension':            -3,  # named 9th/11th/13th not fused to a letter (9, Δ9, 69, but not m9)
  'triad_to_seventh':    5,  # plain seventh chord over a fully held major/minor triad
  }

### coarse perceptual chord families, and the weight each adds to a candidate's score.
### the rules that decide a pattern's family live in qualities.py
family_weights = {
  'Major':       8,
  'Minor':       8,
  'Dom7':        8,
  'Maj7Only':    8,
  'Add9':        6,
  'Sixth':       3,
  'MinorAug5':   6,
  'Nineth':      8,
  'SpecialLast': 1,
  }


### label presets: chord names are defined above with compact 'jazz' symbols.
### the 'general' preset rewrites the head of the name (everything before
### the first '(' or '/') according to this mapping:
general_chord_heads = {
  '':     '',
  'm':    'm',
  '+':    'aug',
  '°':    'dim',
  '-5':   '(b5)',
  '7-5':  '7(b5)',
  '7+5':  '7(#5)',
  'Δ7':   'Maj7',
  'Δ9':   'Maj9',
  'Δ11':  'Maj11',
  'Δ13':  'Maj13',
  'mΔ7':  'mMaj7',
  'mΔ9':  'mMaj9',
  'mΔ11': 'mMaj11',
  'mΔ13': 'mMaj13',
  'ø7':   'm7(b5)',
  '°7':   'dim7',
  }

label_presets = ('jazz', 'general')
