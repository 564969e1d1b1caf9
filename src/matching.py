### chord detection: matching every chord pattern on every root against a set of held
### pitch classes, scoring and filtering the matches, and ranking them into a candidate list.

from .chords import CATALOG, ChordPattern, spell_chord_tones
from .qualities import family_of, family_weight
from .keys import KeyState, get_key_state, key_boost, select_root_name, roman_numeral
from .notes import root_names, cast_pitch_class, is_black
from .parsing import note_split, parse_root_text
from .util import log
from .config.def_chords import score_weights, label_presets
from . import _settings

from dataclasses import dataclass
import numpy as np

# match levels, best first in ranking:
EXACT, OPTIONAL_MISS, PARTIAL = 2, 1, 0
match_level_names = {EXACT: 'exact', OPTIONAL_MISS: 'optional miss', PARTIAL: 'partial'}


@dataclass
class Candidate:
    """one ranked interpretation of a set of held notes as a named chord"""
    name: str                # display name: root spelling + chord suffix
    root: int
    root_name: str
    exact: bool              # every chord tone held, and nothing else
    opt_miss: bool           # every core tone held and nothing else, but some optional tone missing
    is_parenthetical: bool
    match_level: int
    score: int
    family: str
    tones: list              # spelled note names of the chord, ascending
    missing_core: list       # pitch classes
    missing_opt: list
    extras: list             # held pitch classes that the chord does not explain
    pattern: ChordPattern = None
    numeral: str = None      # roman numeral of the root in the current key, if any

    def as_dict(self):
        """the candidate as a plain record for a presentation layer"""
        return {'name': self.name,
                'root': self.root,
                'exact': self.exact,
                'optMiss': self.opt_miss,
                'score': self.score,
                'family': self.family,
                'tones': list(self.tones),
                'missingCore': list(self.missing_core),
                'missingOpt': list(self.missing_opt),
                'extras': list(self.extras)}

    def __str__(self):
        return f'{self.name} [{match_level_names[self.match_level]}, score={self.score}]'


@dataclass
class PatternMatch:
    """how the held notes overlap a single chord pattern on a single root,
    with all tones as lists of pitch classes"""
    core: list
    present_core: list
    missing_core: list
    present_opt: list
    missing_opt: list
    extras: list

    @property
    def exact(self):
        return len(self.missing_core) == 0 and len(self.extras) == 0 and len(self.missing_opt) == 0

    @property
    def opt_miss(self):
        return len(self.missing_core) == 0 and len(self.extras) == 0 and len(self.missing_opt) > 0

    @property
    def match_level(self):
        if self.exact:
            return EXACT
        elif self.opt_miss:
            return OPTIONAL_MISS
        return PARTIAL


def match_pattern(pattern, root, held):
    """compares a chord pattern transposed to 'root' against 'held', a 12-slot
    boolean mask of held pitch classes. a perfect fifth in the pattern's core is
    relaxed: it counts towards neither the core nor the missing tones."""
    core = np.roll(pattern.core_mask, root)
    optional = np.roll(pattern.optional_mask, root) & ~core

    relaxed = np.zeros(12, dtype=bool)
    fifth = (root + 7) % 12
    if core[fifth]:
        core[fifth] = False
        optional[fifth] = True
        relaxed[fifth] = True
    counted_opt = optional & ~relaxed

    as_list = lambda mask: np.flatnonzero(mask).tolist()
    return PatternMatch(core = as_list(core),
                        present_core = as_list(core & held),
                        missing_core = as_list(core & ~held),
                        present_opt = as_list(counted_opt & held),
                        missing_opt = as_list(counted_opt & ~held),
                        extras = as_list(held & ~(core | optional)))

def score_match(pattern, root, match, held_pcs, forced_root=None):
    """the raw score of a pattern match, before family and key bonuses"""
    w = score_weights
    score = 0
    if match.exact:
        score += w['exact']
    elif match.opt_miss:
        score += w['optional_miss']
    score += len(match.present_core) * w['core_hit']
    score += len(match.present_opt) * w['optional_hit']
    score += len(match.missing_core) * w['core_miss']
    score += len(match.missing_opt) * w['optional_miss_tone']
    score += len(match.extras) * w['extra']
    if forced_root is not None and forced_root == root:
        score += w['forced_root']

    if pattern.is_parenthetical:
        score += w['paren']
        if root not in held_pcs:
            score += w['paren_missing_root']
    elif pattern.is_tension and pattern.bare_extension:
        score += w['tension']

    # a held major or minor triad suggests the plain seventh chords on its root:
    if pattern.seventh_form:
        fifth = (root + 7) % 12
        if root in held_pcs and fifth in held_pcs:
            if (root + 4) % 12 in held_pcs or (root + 3) % 12 in held_pcs:
                score += w['triad_to_seventh']
    return score


#### name filtering:

def hidden_by_key(root_name, root, key_state):
    """True for a black-key root spelled against the key's preference: flats in
    sharp keys, sharps in flat keys, and in C major or A minor anything but
    F# and the flat names of the other black keys.
    this applies after spelling, so a root that a key's spelling table names
    against the key signature (Bb in D major) is hidden too."""
    if not is_black(root):
        return False
    letter, offset = note_split(root_name)
    if offset == 0:
        return False
    sharp = offset > 0
    preference = key_state.signature_preference
    if preference == 'sharp':
        return not sharp
    elif preference == 'flat':
        return sharp
    neutral_c = key_state.neutral_base == 'C' and key_state.mode == 'maj'
    neutral_a = key_state.neutral_base == 'A' and key_state.minor
    if neutral_c or neutral_a:
        if root % 12 == 6:
            return not sharp
        return sharp
    return False

def redundant_tensions(pattern):
    """True for chord names that only restate another chord in the catalog,
    e.g. 7(9) is just 9, m7(9,11) is m11, and (13) sounds as 6"""
    head, tags = pattern.head, pattern.tags
    plain = lambda n: str(n) in tags
    altered = lambda n: f'b{n}' in tags or f'#{n}' in tags

    # add7 and add9 heads never come from the built-in catalog, only from extra pattern definitions:
    if 'add7' in head:
        return True
    if head.startswith('add9') and plain(11) and not altered(11):
        return True
    if head.endswith('7') and len(tags) > 0:
        if plain(11) and plain(13) and not altered(11) and not altered(13):
            return True
        if plain(9) and plain(11) and not altered(9) and not altered(11):
            return True
        if plain(9) and '#11' in tags:
            return True
        if tags == ('9',):
            return True
    if head.endswith('9') and plain(11) and not altered(11):
        return True
    if head.endswith('11') and plain(13) and not altered(13):
        return True
    if tags == ('13',) and not any(c.isdigit() for c in head):
        return True
    if head == 'm6' and tags == ('13',):
        return True
    return False

def should_hide(pattern, root_name, root, key_state=None):
    """decides whether a spelled chord name is left out of the results"""
    if key_state is None:
        key_state = get_key_state()
    return hidden_by_key(root_name, root, key_state) or redundant_tensions(pattern)


#### ranking:

def rank_candidates(candidates, max_results=None):
    """keeps the best-scoring candidate for each display name (the first one seen on a tie),
    then sorts by match level, with parenthetical chords after the rest, then by score"""
    if max_results is None:
        max_results = _settings.MAX_CANDIDATES
    best = {}
    for cand in candidates:
        if cand.name not in best or best[cand.name].score < cand.score:
            best[cand.name] = cand
    ranked = sorted(best.values(), key=lambda c: (-c.match_level, c.is_parenthetical, -c.score))
    return ranked[:max_results]


#### input handling:

def _cast_pitch_classes(pitch_classes):
    if isinstance(pitch_classes, (str, int)):
        raise TypeError(f'detect_chords expects a collection of pitch classes, but got: {pitch_classes!r}')
    return sorted({cast_pitch_class(p) for p in pitch_classes})

def _cast_forced_root(forced_root):
    """the forced root as a pitch class, or None for no constraint"""
    if forced_root is None:
        return None
    if isinstance(forced_root, str):
        pc = parse_root_text(forced_root)
        if pc is None:
            log.warn(f'Could not parse forced root {forced_root!r}, searching all roots')
        return pc
    if isinstance(forced_root, bool) or not isinstance(forced_root, (int, np.integer)):
        log.warn(f'Invalid forced root {forced_root!r}, searching all roots')
        return None
    if not (0 <= forced_root < 12):
        log.warn(f'Forced root {forced_root} is out of range 0-11, searching all roots')
        return None
    return int(forced_root)

def _resolve_key_state(key_name, key_mode, key_state):
    if key_state is not None:
        if not isinstance(key_state, KeyState):
            raise TypeError(f'key_state must be a KeyState, not {type(key_state).__name__}')
        return key_state
    if key_name is not None:
        return KeyState.from_key(key_name, key_mode if key_mode is not None else 'maj')
    return get_key_state()


def detect_chords(pitch_classes, forced_root=None, bass=None, key_name=None, key_mode=None,
                  key_state=None, labels=None, max_results=None):
    """identifies and ranks the chords that a set of held notes could be.

    args:
        pitch_classes: collection of pitch classes as ints (any octave, so MIDI note numbers
            work too) or note names like 'C#'.
        forced_root: pitch class or note name; if given, only chords on this root are considered.
            an invalid root is ignored, with a warning.
        bass: lowest held pitch class. accepted for callers' convenience, but not used.
        key_name, key_mode: a key to rank and spell in, like ('Bb', 'maj') or ('E', 'min_har').
        key_state: an explicit KeyState snapshot, which takes precedence over key_name.
            with neither, the process-wide key state is used (see keys.set_key).
        labels: chord label preset, 'jazz' (CΔ7, C°) or 'general' (CMaj7, Cdim).
        max_results: size of the returned list, by default _settings.MAX_CANDIDATES.

    returns a list of Candidate objects, best first. an empty input returns an empty list."""
    held_pcs = _cast_pitch_classes(pitch_classes)
    if len(held_pcs) == 0:
        return []
    # read the key state once, so the whole call works from a single snapshot:
    key_state = _resolve_key_state(key_name, key_mode, key_state)
    forced = _cast_forced_root(forced_root)
    if labels is None:
        labels = _settings.LABEL_PRESET
    if labels not in label_presets:
        log.warn(f'Unknown chord label preset {labels!r}, using jazz labels')
        labels = 'jazz'

    held = np.zeros(12, dtype=bool)
    held[held_pcs] = True
    held_set = set(held_pcs)
    min_hits = min(len(held_pcs), 2)

    roots = [forced] if forced is not None else range(12)
    drafts = []
    for root in roots:
        if key_state.current_key_name is not None:
            names = [select_root_name(root, key_state.current_key_name, key_state.current_key_mode)]
        else:
            names = root_names(root)

        for pattern in CATALOG:
            match = match_pattern(pattern, root, held)
            # parenthetical chords are only shown when every tone is exactly held:
            if pattern.is_parenthetical and not match.exact:
                continue
            if len(match.present_core) < min(len(match.core), min_hits):
                continue

            family = family_of(pattern)
            score = (score_match(pattern, root, match, held_set, forced)
                     + family_weight(family)
                     + key_boost(root, pattern, key_state))
            numeral = roman_numeral(root, pattern, key_state) if key_state.active else None

            for root_name in names:
                if should_hide(pattern, root_name, root, key_state):
                    continue
                drafts.append(Candidate(name = root_name + pattern.label(labels),
                                        root = root,
                                        root_name = root_name,
                                        exact = match.exact,
                                        opt_miss = match.opt_miss,
                                        is_parenthetical = pattern.is_parenthetical,
                                        match_level = match.match_level,
                                        score = score,
                                        family = family,
                                        tones = spell_chord_tones(root_name, pattern),
                                        missing_core = match.missing_core,
                                        missing_opt = match.missing_opt,
                                        extras = match.extras,
                                        pattern = pattern,
                                        numeral = numeral))

    ranked = rank_candidates(drafts, max_results)
    log(f'Detected {len(ranked)} chord candidates from {len(drafts)} matches for {held_pcs}')
    return ranked
