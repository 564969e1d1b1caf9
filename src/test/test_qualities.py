from ..qualities import family_of, family_weight, quality_tag, degree_side, FAMILY_RULES
from ..chords import catalog_by_name, ChordPattern
from .testing_tools import compare

def test_families():
    expected_families = {
        '':        'Major',
        'm':       'Minor',
        '+':       'SpecialLast',
        '°':       'SpecialLast',
        'sus2':    'SpecialLast',
        '7sus4':   'SpecialLast',
        '-5':      'SpecialLast',
        '7-5':     'SpecialLast',
        'ø7':      'SpecialLast',
        '°7':      'SpecialLast',
        '7+5':     'SpecialLast',
        '6':       'Sixth',
        'm6':      'Sixth',
        '69':      'Sixth',
        'm6/9':    'Sixth',
        'm6(b9)':  'Sixth',
        '7':       'Dom7',
        'm7':      'Dom7',
        '7(b9)':   'Dom7',
        'Δ7':      'Maj7Only',
        'mΔ7':     'Maj7Only',
        '(9)':     'Nineth',
        '(b9)':    'Nineth',
        'm(9)':    'Nineth',
        '9':       'Nineth',
        'Δ9':      'Nineth',
        '9(#5)':   'Nineth',
        'm13':     'Nineth',
        }
    for name, family in expected_families.items():
        compare(family_of(catalog_by_name[name]), family)

    # a minor triad with a sharp fifth has its own family, ahead of Minor:
    m_aug5 = ChordPattern('m+5', (0, 3, 8), (), (0, 2, 4))
    compare(family_of(m_aug5), 'MinorAug5')
    # add9 chords are recognised by name:
    add9 = ChordPattern('add9', (0, 4, 7, 14), (), (0, 2, 4, 1))
    compare(family_of(add9), 'Add9')
    compare(family_of(ChordPattern('madd9', (0, 3, 7, 14), (), (0, 2, 4, 1))), 'Nineth')

    # rules are tried in order, so reordering them changes the outcome:
    reordered = [rule for rule in FAMILY_RULES if rule[0] == 'Minor'] + list(FAMILY_RULES)
    compare(family_of(catalog_by_name['m7'], rules=reordered), 'Minor')

    compare(family_weight('Major'), 8)
    compare(family_weight('Sixth'), 3)
    compare(family_weight('SpecialLast'), 1)
    compare(family_weight('Unheard-of'), 0)

def test_quality_tags():
    expected_tags = {'': 'maj', 'm': 'min', '°': 'dim', '°7': 'dim', 'ø7': 'halfDim',
                     'Δ7': 'maj7', '7': 'dom7', '7-5': 'dom7', 'm7': 'min', 'mΔ7': 'min',
                     'sus4': 'maj', '7sus4': 'maj', '+': 'maj'}
    for name, tag in expected_tags.items():
        compare(quality_tag(catalog_by_name[name]), tag)

    compare(degree_side(catalog_by_name['sus4'], 0), 'major')
    compare(degree_side(catalog_by_name['sus4'], 2), 'minor')
    compare(degree_side(catalog_by_name['m7'], 0), 'minor')
    compare(degree_side(catalog_by_name['ø7'], 11), 'dim')
    compare(degree_side(catalog_by_name['7'], 4), 'major')

def unit_test():
    test_families()
    test_quality_tags()

if __name__ == '__main__':
    unit_test()
