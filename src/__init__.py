### chord recognition and ranking from sets of held notes.
### the main entry point is detect_chords, in the matching module.

from .matching import detect_chords, Candidate, should_hide, rank_candidates
from .keys import (KeyState, get_key_state, set_key_state, set_key, clear_key,
                   key_signature_preference, select_root_name, key_boost,
                   scale_pitch_classes, diatonic_pattern, diatonic_chords, roman_numeral)
from .chords import ChordPattern, TensionTag, ParenBase, CATALOG, build_catalog, paren_combinations, format_chord_name, spell_chord_tones
from .qualities import family_of, family_weight
from .notes import pitch_class, pitch_class_names, root_names, spell_pitch_class, key_accidental_map
from .parsing import parse_root_text
