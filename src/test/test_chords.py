from ..chords import (CATALOG, catalog_by_name, build_catalog, paren_combinations, make_tension_tags,
                      make_paren_bases, ChordPattern, spell_chord_tones, format_chord_name, split_root_name)
from .testing_tools import compare

def test_catalog():
    # 20 base patterns, 18 tension patterns, and 139 parenthetical combinations:
    compare(len(CATALOG), 177)
    compare(CATALOG[0].name, '')
    compare(len({p.name for p in CATALOG}), len(CATALOG))
    # built once and immutable:
    compare(type(CATALOG), tuple)

    tags = make_tension_tags()
    m6_base = [b for b in make_paren_bases() if b.name == 'm6'][0]
    compare([p.name for p in paren_combinations(m6_base, tags)],
            ['m6(b9)', 'm6(9)', 'm6(b9,9)', 'm6(11)', 'm6(b9,11)', 'm6(9,11)', 'm6(b9,9,11)'])
    compare(len(list(paren_combinations(m6_base, tags, max_count=1))), 3)

    # generated patterns keep the base core and take the tensions as optional tones:
    p = catalog_by_name['7(b9,13)']
    compare(p.core, (0, 4, 7, 10))
    compare(p.optional, (13, 21))
    compare(p.degrees, (0, 2, 4, 6, 1, 5))
    compare(p.base_name, '7')

def test_malformed_definitions():
    bad_definitions = [
        # degrees out of step with intervals:
        dict(base_patterns=[('x', [0, 4], [], [0], 'bad')], tension_patterns=[]),
        # tension that does not exist:
        dict(paren_bases=[('', [0, 4, 7], [0, 2, 4], ['b10'], 'bad')]),
        # the same name twice:
        dict(base_patterns=[('', [0, 4], [], [0, 2], 'a'), ('', [0, 4], [], [0, 2], 'b')], tension_patterns=[]),
        ]
    for kwargs in bad_definitions:
        try:
            build_catalog(**kwargs)
            raised = False
        except ValueError:
            raised = True
        compare(raised, True)

def test_structure():
    m7 = catalog_by_name['m7']
    compare((m7.third, m7.fifth, m7.seventh), (3, 7, 10))
    compare(catalog_by_name['sus4'].suspended, True)
    compare(catalog_by_name['°7'].seventh, 9)
    compare(catalog_by_name['°7'].has_sixth, False)
    compare(catalog_by_name['m6'].has_sixth, True)
    compare(catalog_by_name['69'].is_tension, True)
    compare(catalog_by_name['69'].is_parenthetical, False)
    compare(catalog_by_name['13'].extensions, (21, 14, 17))
    # 9, 11 and 13 written as tokens of their own, not fused to the minor letter:
    compare([name for name in ('9', '13(b5)', '69', 'm6/9', 'Δ9', 'mΔ11', 'm9', 'm11', 'm13')
             if catalog_by_name[name].bare_extension],
            ['9', '13(b5)', '69', 'm6/9', 'Δ9', 'mΔ11'])

    paren = catalog_by_name['7(b9)']
    compare(paren.is_parenthetical, True)
    compare(paren.is_tension, False)
    compare(paren.tags, ('b9',))
    # alterations written into a defined name also count as parenthetical:
    altered = catalog_by_name['9(b5)']
    compare(altered.head, '9')
    compare(altered.tags, ('b5',))
    compare(altered.is_parenthetical, True)

    compare([name for name in catalog_by_name if catalog_by_name[name].seventh_form],
            ['7', 'Δ7', 'm7', 'mΔ7'])

    compare(list(catalog_by_name['m'].core_mask.nonzero()[0]), [0, 3])
    compare(list(catalog_by_name['9'].core_mask.nonzero()[0]), [0, 2, 4, 10])

def test_labels():
    compare(catalog_by_name['Δ7'].label('jazz'), 'Δ7')
    compare(catalog_by_name['Δ7'].label('general'), 'Maj7')
    compare(catalog_by_name['°'].label('general'), 'dim')
    compare(catalog_by_name['7(b9)'].label('general'), '7(b9)')

    compare(format_chord_name('BbΔ7', 'general'), 'BbMaj7')
    compare(format_chord_name('Cø7', 'general'), 'Cm7(b5)')
    compare(format_chord_name('F#°7', 'general'), 'F#dim7')
    compare(format_chord_name('E7+5', 'general'), 'E7(#5)')
    compare(format_chord_name('Cm6/9', 'general'), 'Cm6/9')
    compare(format_chord_name('CΔ7', 'jazz'), 'CΔ7')
    compare(format_chord_name('', 'general'), '')

    compare(split_root_name('Cbb7'), ('Cbb', '7'))
    compare(split_root_name('Cm7'), ('C', 'm7'))

def test_spelling():
    compare(spell_chord_tones('Eb', catalog_by_name['m7']), ['Eb', 'Gb', 'Bb', 'Db'])
    compare(spell_chord_tones('C', catalog_by_name['°7']), ['C', 'Eb', 'Gb', 'Bbb'])
    compare(spell_chord_tones('C', catalog_by_name['69']), ['C', 'E', 'G', 'A', 'D'])
    compare(spell_chord_tones('F#', catalog_by_name['Δ7']), ['F#', 'A#', 'C#', 'E#'])
    compare(spell_chord_tones('G', catalog_by_name['7(b9,13)']), ['G', 'B', 'D', 'F', 'Ab', 'E'])
    compare(spell_chord_tones('C', catalog_by_name['7+5']), ['C', 'E', 'G#', 'Bb'])

def unit_test():
    test_catalog()
    test_malformed_definitions()
    test_structure()
    test_labels()
    test_spelling()

if __name__ == '__main__':
    unit_test()
