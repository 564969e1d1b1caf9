from ..parsing import note_split, parse_root_text, parse_key_mode, is_minor_mode
from .testing_tools import compare

def test_note_names():
    compare(note_split('Eb'), ('E', -1))
    compare(note_split('F♯'), ('F', 1))
    compare(note_split('Cx'), ('C', 2))
    compare(note_split('B𝄫'), ('B', -2))
    compare(note_split('G'), ('G', 0))
    try:
        note_split('H#')
        raised = False
    except ValueError:
        raised = True
    compare(raised, True)

    # double accidentals count twice:
    compare(parse_root_text('B𝄫'), 9)
    compare(parse_root_text('C##'), 2)
    compare(parse_root_text('Eb#'), None)

def test_root_text():
    compare(parse_root_text('C'), 0)
    compare(parse_root_text('c#'), 1)
    compare(parse_root_text(' D♭ '), 1)
    compare(parse_root_text('E#'), 5)
    compare(parse_root_text('Fb'), 4)
    compare(parse_root_text('B#'), 0)
    compare(parse_root_text('Cb'), 11)
    # unparseable text is None rather than an error:
    compare(parse_root_text(''), None)
    compare(parse_root_text('X'), None)
    compare(parse_root_text('C7'), None)
    compare(parse_root_text(None), None)

def test_key_modes():
    compare(parse_key_mode('maj'), 'maj')
    compare(parse_key_mode('major'), 'maj')
    compare(parse_key_mode('Minor'), 'min_nat')
    compare(parse_key_mode('minorHarmonic'), 'min_har')
    compare(parse_key_mode('melodic minor'), 'min_mel')
    # m and M are both valid but mean different things:
    compare(parse_key_mode('m'), 'min_nat')
    compare(parse_key_mode('M'), 'maj')
    compare(parse_key_mode('dorian'), None)
    compare(parse_key_mode(None), None)
    compare(parse_key_mode(3), None)

    compare(is_minor_mode('min_har'), True)
    compare(is_minor_mode('maj'), False)
    compare(is_minor_mode(None), False)

def unit_test():
    test_note_names()
    test_root_text()
    test_key_modes()

if __name__ == '__main__':
    unit_test()
