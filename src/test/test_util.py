from ..util import power_set, unpack_and_reverse_dict, Log
from .testing_tools import compare

from contextlib import redirect_stdout, redirect_stderr
import io

def test_power_set():
    # subsets come out in order of discovery, each preserving input order:
    compare(power_set('ab'), [[], ['a'], ['b'], ['a', 'b']])
    compare(len(power_set(range(7))), 128)
    compare(power_set([]), [[]])
    # the last subset is always the full input:
    compare(power_set([1, 2, 3])[-1], [1, 2, 3])

def test_dict_helpers():
    compare(unpack_and_reverse_dict({'x': ['y', 'z']}), {'y': 'x', 'z': 'x'})
    compare(unpack_and_reverse_dict({'x': ['y']}, include_keys=True), {'y': 'x', 'x': 'x'})
    compare(unpack_and_reverse_dict({'x': 'y'}, force_list=True), {'y': 'x'})
    try:
        unpack_and_reverse_dict({'x': 'y'})
        raised = False
    except TypeError:
        raised = True
    compare(raised, True)

def test_log():
    quiet, loud = Log(verbose=False), Log(verbose=True)
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        quiet('hidden message')
        loud('shown message')
        quiet.warn('always shown')
    compare('hidden message' in out.getvalue(), False)
    compare('shown message' in out.getvalue(), True)
    compare('WARNING: always shown' in err.getvalue(), True)
    # log lines name the function that logged them:
    compare('(test_log)' in out.getvalue(), True)

def unit_test():
    test_power_set()
    test_dict_helpers()
    test_log()

if __name__ == '__main__':
    unit_test()
