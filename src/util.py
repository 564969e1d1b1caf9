import sys
import time
import inspect

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def _context(self, depth=2):
        # depth 2 is the function that called log() or log.warn()
        cur_frame = inspect.currentframe()
        call_frame = inspect.getouterframes(cur_frame, 2)
        wall_time = time.time() - global_init_time
        return f'[{wall_time:.06f}]({call_frame[depth][3]}) '

    def __call__(self, msg):
        if self.verbose:
            print(self._context() + msg)

    def warn(self, msg):
        """reports a recovered problem (e.g. an unknown key name that fell
        back to a default spelling). unlike ordinary log messages these are
        always shown, on stderr, whether or not verbose is set"""
        print(self._context() + 'WARNING: ' + msg, file=sys.stderr)

log = Log()

# generically useful functions used across modules:
def unpack_and_reverse_dict(dct, include_keys=False, force_list=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            # we expected the value to be an iterable, but it isn't one
            if force_list:
                # set it to be one anyway:
                v_list = [v_list]
            else:
                raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists of strings")

        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct

def power_set(items):
    """returns every subset of 'items' as a list of lists, starting from the
    empty list, where each subset preserves the order of the input.
    e.g. power_set('ab') is: [[], ['a'], ['b'], ['a', 'b']]"""
    subsets = [[]]
    for item in items:
        # extend each subset found so far by this item:
        subsets.extend([s + [item] for s in subsets])
    return subsets
