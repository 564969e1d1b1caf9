import time
global_init_time = time.time()

class TestSuite:
    def __init__(self, silent=False, graceful=False):
        self.silent = silent
        self.graceful = graceful

    def __call__(self, op, exp, compare='equal'):
        ### test output of an operation against its expected value.
        ### compare modes:
        ###   'equal':   op == exp (within 1e-10 for floats)
        ###   'in':      op is a member of exp
        ###   'greater': op > exp
        start_time = time.time()

        if type(exp) == float:
            assert isinstance(op, (float, int))
            result = abs(op - exp) < 1e-10
        elif compare == 'equal':
            result = (op == exp)
        elif compare == 'in':
            result = (op in exp)
        elif compare == 'greater':
            result = (op > exp)
        else:
            raise ValueError(f'Unknown comparison mode: {compare}')

        finished_time = time.time()
        wall_time = start_time - global_init_time
        exec_time_ms = (finished_time - start_time) * 1000.

        resultstr = 'TEST +++ PASS' if result else 'TEST --- FAIL'
        if not self.silent:
            print(f'[{wall_time:.06f}] {resultstr} ({compare}):\n obs: {op}\n exp: {exp}\n   (execution time: {exec_time_ms:.04f}ms)\n')

        if not result and not self.graceful:
            raise AssertionError(f'Test failed: {op!r} vs {exp!r} ({compare})')

compare = TestSuite(silent=False)
