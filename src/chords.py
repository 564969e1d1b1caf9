from .util import log, power_set
from .parsing import note_split, natural_note_names, natural_positions, offset_names
from .config import def_chords
from . import _settings

from dataclasses import dataclass
from functools import cached_property
import numpy as np
import re

################################################################################

# scale degrees (counted from 0) that decide how a chord tone is named:
ROOT, SECOND, THIRD, FOURTH, FIFTH, SIXTH, SEVENTH = range(7)


@dataclass(frozen=True)
class TensionTag:
    """a single chord extension that can be listed inside parentheses, like the b9 in C7(b9)"""
    label: str
    interval: int
    degree: int
    description: str = ''


@dataclass(frozen=True)
class ParenBase:
    """a triad or seventh skeleton, and the tension labels it may be combined with"""
    name: str
    core: tuple
    degrees: tuple
    allow: tuple
    description: str = ''


@dataclass(frozen=True)
class ChordPattern:
    """a chord template defined by semitone intervals above a root (which may exceed 11
    to mark extensions, e.g. 14 is a ninth), split into core tones that must be held
    and optional tones that may be left out.

    'degrees' assigns a scale degree to each interval of core+optional, in that order,
    and decides the letter each tone is spelled with.

    the structural properties below are derived from the intervals and degrees.
    only bare_extension reads the written name."""
    name: str
    core: tuple
    optional: tuple = ()
    degrees: tuple = ()
    description: str = ''
    tensions: tuple = ()       # TensionTags listed in parentheses, for generated patterns
    alterations: tuple = ()    # parenthesised alterations written into a defined name, e.g. 'b5' in 9(b5)
    base_name: str = None      # the name before any parentheses

    def __post_init__(self):
        if len(self.degrees) != len(self.core) + len(self.optional):
            raise ValueError(f'Chord pattern {self.name!r} has {len(self.degrees)} degrees'
                             f' for {len(self.core) + len(self.optional)} intervals')
        if len(self.core) == 0:
            raise ValueError(f'Chord pattern {self.name!r} has no core intervals')

    @property
    def intervals(self):
        return tuple(self.core) + tuple(self.optional)

    @property
    def head(self):
        """the part of the name before any parentheses: '7' for 7(b9), '9' for 9(#11)"""
        return self.base_name if self.base_name is not None else self.name

    @cached_property
    def degree_intervals(self):
        """dict mapping each scale degree (0-6) to the simple intervals (0-11) on it"""
        by_degree = {}
        for iv, deg in zip(self.intervals, self.degrees):
            if iv < 12:
                by_degree.setdefault(deg % 7, []).append(iv)
        return by_degree

    def _on_degree(self, degree):
        ivs = self.degree_intervals.get(degree, [])
        return ivs[0] if len(ivs) > 0 else None

    ### chord structure:
    @cached_property
    def third(self):
        """3 for a minor third, 4 for a major third, or None if suspended"""
        return self._on_degree(THIRD)

    @cached_property
    def fifth(self):
        return self._on_degree(FIFTH)

    @cached_property
    def seventh(self):
        """10 for a minor seventh, 11 for a major seventh, 9 for a diminished seventh, else None"""
        return self._on_degree(SEVENTH)

    @cached_property
    def has_sixth(self):
        return 9 in self.degree_intervals.get(SIXTH, [])

    @property
    def suspended(self):
        return self.third is None

    @cached_property
    def tension_intervals(self):
        return tuple(t.interval for t in self.tensions)

    @cached_property
    def extensions(self):
        """intervals of 12 or more that belong to the chord's own name (the 9 in m9,
        the 13 in 13(b5)) rather than to a parenthesised tension"""
        return tuple(iv for iv in self.intervals if iv >= 12 and iv not in self.tension_intervals)

    @cached_property
    def tags(self):
        """labels written inside this pattern's parentheses, in written order"""
        return tuple(t.label for t in self.tensions) + tuple(self.alterations)

    @property
    def is_parenthetical(self):
        return len(self.tags) > 0

    @property
    def is_tension(self):
        """True for a chord whose name carries a 9th, 11th or 13th of its own"""
        return len(self.extensions) > 0

    @cached_property
    def bare_extension(self):
        """True if the chord's name writes its 9, 11 or 13 as a token of its own, as in
        9, 13(b5), 69, m6/9 or Δ9, rather than fused to a letter as in m9 or m11"""
        return re.search(r'(^|[^A-Za-z])(9|11|13)(?!\d)', self.head) is not None

    @cached_property
    def seventh_form(self):
        """True for the plain seventh chords that a held triad may suggest:
        major seventh, minor seventh, minor-major seventh and dominant seventh"""
        if self.is_parenthetical or self.is_tension or self.has_sixth:
            return False
        return (self.third in (3, 4)) and (self.seventh in (10, 11)) and (self.fifth in (None, 7))

    ### pitch-class masks at root C, for transposition by np.roll:
    @cached_property
    def core_mask(self):
        mask = np.zeros(12, dtype=bool)
        mask[[iv % 12 for iv in self.core]] = True
        return mask

    @cached_property
    def optional_mask(self):
        mask = np.zeros(12, dtype=bool)
        if len(self.optional) > 0:
            mask[[iv % 12 for iv in self.optional]] = True
        return mask

    def label(self, preset=None):
        """this pattern's name as written under a label preset ('jazz' or 'general')"""
        if preset is None:
            preset = _settings.LABEL_PRESET
        return relabel(self.name, preset)

    def __str__(self):
        return f'ChordPattern:{self.name or "(major)"}'

    def __repr__(self):
        return str(self)


def relabel(suffix, preset):
    """rewrites a chord suffix (with no root name) under a label preset"""
    if preset not in def_chords.label_presets:
        log.warn(f'Unknown chord label preset {preset!r}, using jazz labels')
        return suffix
    if preset == 'jazz':
        return suffix
    # split off the head before any parenthesis or slash:
    cut = len(suffix)
    for delim in '(/':
        if delim in suffix:
            cut = min(cut, suffix.index(delim))
    head, tail = suffix[:cut], suffix[cut:]
    return def_chords.general_chord_heads.get(head, head) + tail

def split_root_name(name):
    """splits a full chord name like 'F#m7' into its root name and suffix: ('F#', 'm7')"""
    if len(name) == 0 or name[0] not in natural_positions:
        raise ValueError(f'Chord name does not start with a note name: {name}')
    # longest valid accidental first, so that 'Cbb' splits as 'Cbb' and not 'Cb':
    for end in range(min(len(name), 3), 0, -1):
        try:
            note_split(name[:end])
            return name[:end], name[end:]
        except ValueError:
            continue
    raise ValueError(f'Chord name does not start with a note name: {name}')

def format_chord_name(name, preset=None):
    """rewrites a full chord name, root included, under a label preset:
    e.g. format_chord_name('BbΔ7', 'general') returns 'BbMaj7'"""
    if preset is None:
        preset = _settings.LABEL_PRESET
    if not name:
        return name
    try:
        root, suffix = split_root_name(name)
    except ValueError:
        return name
    return root + relabel(suffix, preset)


################################################################################
### catalog construction

def _split_alterations(name):
    """separates a defined name like '9(b5)' into its head and its written alterations"""
    if '(' not in name:
        return name, ()
    head, rest = name.split('(', 1)
    inside = rest.rstrip(')')
    return head, tuple(a.strip() for a in inside.split(',') if a.strip())

def make_tension_tags(tag_defs=None):
    if tag_defs is None:
        tag_defs = def_chords.tension_tags
    return tuple(TensionTag(label, iv, deg, desc) for label, (iv, deg, desc) in tag_defs.items())

def make_paren_bases(base_defs=None):
    if base_defs is None:
        base_defs = def_chords.paren_bases
    return tuple(ParenBase(name, tuple(core), tuple(degrees), tuple(allow), desc)
                 for name, core, degrees, allow, desc in base_defs)

def paren_combinations(base, tags, max_count=None):
    """yields a pattern for each combination of 1 to max_count tension tags that the
    ParenBase 'base' allows, in the order the tags are given, named like '7(b9,13)'"""
    if max_count is None:
        max_count = _settings.MAX_PAREN_TENSIONS
    known = {t.label for t in tags}
    for label in base.allow:
        if label not in known:
            raise ValueError(f'Paren base {base.name!r} allows unknown tension: {label}')
    allowed = set(base.allow)
    for combo in power_set(tags):
        if not (0 < len(combo) <= max_count):
            continue
        if not all(t.label in allowed for t in combo):
            continue
        yield ChordPattern(name = base.name + '(' + ','.join(t.label for t in combo) + ')',
                           core = base.core,
                           optional = tuple(t.interval for t in combo),
                           degrees = base.degrees + tuple(t.degree for t in combo),
                           description = base.description,
                           tensions = tuple(combo),
                           base_name = base.name)

def build_catalog(base_patterns=None, tension_patterns=None, tension_tags=None, paren_bases=None, max_tensions=None):
    """builds the full ordered, immutable chord catalog: base patterns, then tension
    patterns, then every allowed parenthetical combination of each paren base.
    args default to the definitions in config.def_chords"""
    if base_patterns is None:
        base_patterns = def_chords.base_patterns
    if tension_patterns is None:
        tension_patterns = def_chords.tension_patterns
    tags = make_tension_tags(tension_tags)
    bases = make_paren_bases(paren_bases)

    catalog = []
    for name, core, optional, degrees, desc in list(base_patterns) + list(tension_patterns):
        head, alterations = _split_alterations(name)
        catalog.append(ChordPattern(name, tuple(core), tuple(optional), tuple(degrees), desc,
                                    alterations=alterations, base_name=head))
    for base in bases:
        catalog.extend(paren_combinations(base, tags, max_tensions))

    names = [p.name for p in catalog]
    if len(set(names)) != len(names):
        raise ValueError('Chord catalog contains duplicate pattern names')
    log(f'Built chord catalog of {len(catalog)} patterns')
    return tuple(catalog)

# built once, on import:
CATALOG = build_catalog()
catalog_by_name = {p.name: p for p in CATALOG}


################################################################################
### spelling of chord tones

def spell_chord_tones(root_name, pattern):
    """returns the note names of a chord pattern's tones over a spelled root,
    ascending by interval, e.g. ('Eb', ChordPattern:m7) -> ['Eb', 'Gb', 'Bb', 'Db'].
    each tone takes its letter from its scale degree and whatever accidental
    brings that letter to the right pitch."""
    root_letter, root_offset = note_split(root_name)
    root_pc = (natural_positions[root_letter] + root_offset) % 12
    letter_idx = natural_note_names.index(root_letter)

    tones = []
    for iv, deg in sorted(zip(pattern.intervals, pattern.degrees), key=lambda pair: pair[0]):
        letter = natural_note_names[(letter_idx + deg) % 7]
        target = (root_pc + iv) % 12
        diff = (target - natural_positions[letter]) % 12
        if diff > 6:
            diff -= 12
        if diff not in offset_names:
            # no single accidental reaches this pitch from this letter:
            log(f'Could not spell interval {iv} on degree {deg} over {root_name}')
            diff = 0
        tones.append(letter + offset_names[diff])
    return tones
