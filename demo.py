### this demo script just imports the entire chordsight namespace for easy access.
### it's intended to be used interactively without the need to install the package properly,
### e.g.:  $ python -i demo.py

import time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, parsing, _settings
from src.notes import *
from src.chords import *
from src.qualities import *
from src.keys import *
from src.matching import *

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'chordsight library initialised in {init_time:.2} seconds ({len(CATALOG)} chord patterns)')

def show(pitch_classes, top=8, **kwargs):
    """prints the top candidates for a set of held notes, e.g. show('CEGB', key_name='C')"""
    if isinstance(pitch_classes, str):
        pitch_classes = [p for p in pitch_classes]
    for cand in detect_chords(pitch_classes, **kwargs)[:top]:
        numeral = f' ({cand.numeral})' if cand.numeral else ''
        print(f'{cand.name:<14}{numeral:<8} {cand.score:>4}  {"-".join(cand.tones):<20} {cand.family}')
