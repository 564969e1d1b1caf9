############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats when a single name is needed and no key gives any
### information. note that chord detection without a key reports BOTH
### spellings of a black-key root (e.g. C#m and Dbm) as separate candidates;
### this setting only decides which of the pair is listed first, and which
### name is used by fallback paths like an unrecognised key name.
DEFAULT_SHARPS = True

### LABEL_PRESET controls how chord suffixes are written in candidate names.
### 'jazz' uses compact chord symbols:      CΔ7, C°, Cø7, C+, C7-5
### 'general' uses plain-text chord words:  CMaj7, Cdim, Cm7(b5), Caug, C7(b5)
### either can be requested per call with the 'labels' arg to detect_chords,
### this is only the default.
LABEL_PRESET = 'jazz'


############# ranking settings:

### MAX_CANDIDATES is the number of ranked chord candidates returned by
### detect_chords after deduplication and sorting.
MAX_CANDIDATES = 32

### MAX_PAREN_TENSIONS is the largest number of tensions combined inside one
### set of parentheses when the chord catalog is built, e.g. 7(b9,#11,13)
### has three. raising this grows the catalog combinatorially.
MAX_PAREN_TENSIONS = 3
